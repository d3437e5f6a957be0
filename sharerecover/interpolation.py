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
"""Reconstruct the secret of a threshold secret sharing from its shares (points)

The shares of a (n, k) threshold scheme are points on a polynomial of degree
k-1 whose constant term is the secret. Interpolating k of them solves the
Vandermonde system

    [x_i^(k-1), ..., x_i, 1 | y_i]   for i = 0, ..., k-1

for the coefficients in descending order of powers. The last coefficient is
the secret.
"""

import logging
from typing import Iterable, List, NamedTuple, Sequence, Union

from sharerecover.names import *
from sharerecover.errors import DuplicatePoint, InsufficientShares, InvalidThreshold, NonIntegralSecret
from sharerecover.math import BigFraction, RationalMatrix, get_gauss_instance


class SharePoint(NamedTuple):
    """One share: x-coordinate and decoded value y"""
    x: int
    y: int


Point = Union[SharePoint, Sequence[int]]


def _as_share_points(points: Iterable[Point]) -> List[SharePoint]:
    return [p if isinstance(p, SharePoint) else SharePoint(*p) for p in points]


def select_points(points: Iterable[Point], k: int) -> List[SharePoint]:
    """Choose the k shares used for interpolation

    Shares are sorted by ascending x and the first k are taken.

    Args:
        points (list of SharePoint or (x, y) pairs):
            All available shares.

        k (int):
            Reconstruction threshold.

    Returns:
        (list of SharePoint):
        k shares with pairwise distinct x-coordinates, sorted by x.

    Raises:
        InvalidThreshold: k < 1
        InsufficientShares: fewer than k points
        DuplicatePoint: two of the selected points share an x-coordinate
    """
    if k < 1:
        raise InvalidThreshold(k)
    points = _as_share_points(points)
    if len(points) < k:
        raise InsufficientShares(k, len(points))
    selected = sorted(points, key=lambda p: p.x)[:k]
    for prev, curr in zip(selected, selected[1:]):
        if prev.x == curr.x:
            raise DuplicatePoint(curr.x)
    return selected


def build_augmented_matrix(points: Sequence[Point]) -> RationalMatrix:
    """Vandermonde system of a polynomial through the given points

    Row i is [x_i^(k-1), ..., x_i^1, x_i^0 | y_i] with k = len(points).
    """
    points = _as_share_points(points)
    k = len(points)
    return RationalMatrix.from_rows([[p.x**j for j in range(k - 1, -1, -1)] + [p.y] for p in points])


def interpolate(points: Iterable[Point], k: int, backend: str = FRACTION) -> List[BigFraction]:
    """Coefficients of the degree k-1 polynomial through k of the points

    Args:
        points (list of SharePoint or (x, y) pairs):
            Shares, at least k. See select_points for the choice of shares.

        k (int):
            Reconstruction threshold.

        backend (optional (str)): (Default: 'fraction')
            Linear solver, one of 'fraction', 'sympy', 'flint'.

    Returns:
        (list of BigFraction):
        Coefficients from the highest power down to the constant term.
    """
    selected = select_points(points, k)
    logging.debug(f"Interpolating with shares at x = {[p.x for p in selected]}.")
    return get_gauss_instance(backend).solve(build_augmented_matrix(selected))


def evaluate_polynomial(coefficients: Sequence, x) -> BigFraction:
    """Evaluate a polynomial given by descending coefficients at x (Horner scheme)"""
    value = BigFraction.ZERO
    for c in coefficients:
        value = value * x + c
    return value


def recover_secret(points: Iterable[Point], k: int, **kwargs) -> int:
    """Recover the secret (constant term) from the shares of a threshold scheme

    Example:
        secret = recover_secret([(1, 3), (2, 5), (3, 7)], 3)

    Args:
        points (list of SharePoint or (x, y) pairs):
            Shares with decoded values. If more than k are given, the k shares
            with the smallest x are used.

        k (int):
            Reconstruction threshold (degree of the polynomial plus one).

        backend (optional (str)): (Default: 'fraction')
            Linear solver, one of 'fraction', 'sympy', 'flint'.

        non_integral (optional (str)): (Default: 'warn')
            What to do if the constant term is not an integer, which happens
            when the shares do not lie on one integer polynomial.
            'warn' truncates toward zero and logs a warning, 'raise' raises
            NonIntegralSecret and 'truncate' truncates silently.

    Returns:
        (int):
        The secret.
    """
    allowed_keys = {BACKEND, NON_INTEGRAL}
    for key in kwargs:
        if key not in allowed_keys:
            raise ValueError("Key " + key + " is not supported.")
    backend = kwargs.get(BACKEND, FRACTION)
    policy = kwargs.get(NON_INTEGRAL, WARN)
    if policy not in NON_INTEGRAL_POLICIES:
        raise ValueError(f"Unknown value '{policy}' for {NON_INTEGRAL}, choose from {', '.join(NON_INTEGRAL_POLICIES)}")

    constant = interpolate(points, k, backend)[-1]
    if constant.is_integer():
        return constant.numerator
    if policy == RAISE:
        raise NonIntegralSecret(constant)
    if policy == WARN:
        logging.warning(f"Constant term {constant} is not an integer, the shares might be inconsistent. "
                        f"Truncating to {constant.to_big_integer()}.")
    return constant.to_big_integer()
