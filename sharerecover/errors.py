#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Exceptions raised while decoding shares and reconstructing a secret

Every exception derives from SecretRecoveryError and from the builtin exception
that describes the failure best, so that callers may catch either.
"""


class SecretRecoveryError(Exception):
    """Base class of all errors raised by sharerecover"""


class InvalidRadix(SecretRecoveryError, ValueError):
    """The radix of an encoded share value lies outside of [2, 36]"""

    def __init__(self, radix, point=None):
        self.radix = radix
        self.point = point
        msg = f"Invalid base: {radix}"
        if point is not None:
            msg += f" (x={point})"
        super().__init__(msg)


class InvalidDigit(SecretRecoveryError, ValueError):
    """A character of an encoded share value is not an alphanumeric digit symbol"""

    def __init__(self, char, point=None):
        self.char = char
        self.point = point
        msg = f"Invalid character '{char}' in value"
        if point is not None:
            msg += f" (x={point})"
        super().__init__(msg)


class DigitOutOfRange(SecretRecoveryError, ValueError):
    """A digit of an encoded share value is not smaller than the radix"""

    def __init__(self, char, radix, point=None):
        self.char = char
        self.radix = radix
        self.point = point
        msg = f"Digit {char} invalid for base {radix}"
        if point is not None:
            msg += f" (x={point})"
        super().__init__(msg)


class DuplicatePoint(SecretRecoveryError, ValueError):
    """Two selected shares have the same x-coordinate"""

    def __init__(self, x):
        self.x = x
        super().__init__(f"Duplicate x-values detected: x={x}")


class SingularMatrix(SecretRecoveryError, ArithmeticError):
    """The linear system has no unique solution"""

    def __init__(self, msg="Matrix is singular"):
        super().__init__(msg)


class DivisionByZero(SecretRecoveryError, ZeroDivisionError):
    """Division of an exact number by zero"""

    def __init__(self, msg="Division by zero"):
        super().__init__(msg)


class InvalidThreshold(SecretRecoveryError, ValueError):
    """The reconstruction threshold k is smaller than one"""

    def __init__(self, k):
        self.k = k
        super().__init__(f"k must be at least 1, got {k}")


class InsufficientShares(SecretRecoveryError, ValueError):
    """Fewer shares than the threshold k were supplied"""

    def __init__(self, k, available):
        self.k = k
        self.available = available
        super().__init__(f"Need {k} points, got {available}")


class NonIntegralSecret(SecretRecoveryError, ArithmeticError):
    """The interpolated constant term is not an integer

    Shares of one integer polynomial always yield an integral constant term,
    so a fraction means that the shares do not belong together.
    """

    def __init__(self, value):
        self.value = value
        super().__init__(f"Constant term {value} is not an integer, the shares are inconsistent")


class InvalidDescriptor(SecretRecoveryError, ValueError):
    """The share descriptor is malformed"""
