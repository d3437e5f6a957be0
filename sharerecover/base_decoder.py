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
"""Decode share values written in a radix between 2 and 36"""

from sharerecover.names import MIN_RADIX, MAX_RADIX
from sharerecover.errors import InvalidRadix, InvalidDigit, DigitOutOfRange


def digit_value(char: str, point=None) -> int:
    """Value of a single digit symbol: '0'-'9' map to 0-9, 'a'-'z' (any case) to 10-35.

    Raises:
        InvalidDigit: If char is not an ASCII letter or digit
    """
    if not char.isascii():
        raise InvalidDigit(char, point)
    c = char.lower()
    if '0' <= c <= '9':
        return ord(c) - ord('0')
    if 'a' <= c <= 'z':
        return ord(c) - ord('a') + 10
    raise InvalidDigit(char, point)


def decode(digits: str, radix: int, point=None) -> int:
    """Convert a digit string in the given radix into a non-negative integer

    The digits are read most significant first. Letters are case-insensitive.
    Signs, whitespace and separators are not accepted. The empty string
    decodes to 0.

    Example:
        decode('1a', 16) == 26

    Args:
        digits (str):
            Encoded value.

        radix (int):
            Base of the encoding, between 2 and 36.

        point (optional):
            x-coordinate of the share the value belongs to. It is only used
            to identify the share in error messages.

    Returns:
        (int):
        The decoded value.

    Raises:
        InvalidRadix, InvalidDigit, DigitOutOfRange
    """
    if isinstance(radix, bool) or not isinstance(radix, int) or not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidRadix(radix, point)
    value = 0
    for char in digits:
        digit = digit_value(char, point)
        if digit >= radix:
            raise DigitOutOfRange(char, radix, point)
        value = value * radix + digit
    return value
