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
"""Read share descriptors

A share descriptor is a JSON object with the threshold parameters under 'keys'
and one entry per share, keyed by its x-coordinate:

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"}
    }

Each share value is written in its own base and decoded to an integer.
"""

import json
import logging
import re
from typing import List, NamedTuple

from sharerecover.names import *
from sharerecover.errors import InvalidDescriptor, InvalidThreshold
from sharerecover.base_decoder import decode
from sharerecover.interpolation import SharePoint, recover_secret


class ShareDescriptor(NamedTuple):
    """Threshold parameters and decoded shares of a descriptor"""
    n: int
    k: int
    points: List[SharePoint]


def _parse_int(value, what: str) -> int:
    if isinstance(value, bool):
        raise InvalidDescriptor(f"Invalid {what}: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if re.fullmatch(r"\s*[+-]?[0-9]+\s*", value):
            return int(value)
    raise InvalidDescriptor(f"Invalid {what}: {value!r}")


def _parse_count(value) -> int:
    # JSON numbers: ints and integral floats such as 4.0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise InvalidDescriptor("Invalid JSON: missing or invalid keys")


def parse_descriptor(data: dict) -> ShareDescriptor:
    """Validate a descriptor and decode its shares

    Args:
        data (dict):
            Parsed JSON object of a share descriptor.

    Returns:
        (ShareDescriptor):
        n, k and the decoded shares in the order of the descriptor.

    Raises:
        InvalidDescriptor: Missing or malformed entries.
        InvalidThreshold: k < 1.
        InvalidRadix, InvalidDigit, DigitOutOfRange: A share value cannot be decoded.
    """
    if not isinstance(data, dict):
        raise InvalidDescriptor("Invalid JSON: descriptor must be an object")
    keys = data.get(KEYS)
    if not isinstance(keys, dict):
        raise InvalidDescriptor("Invalid JSON: missing or invalid keys")
    n = _parse_count(keys.get(N))
    k = _parse_count(keys.get(K))
    if k < 1:
        raise InvalidThreshold(k)

    points = []
    for key, entry in data.items():
        if key == KEYS:
            continue
        x = _parse_int(key, "x-coordinate")
        if not isinstance(entry, dict) or not entry.get(BASE) or not entry.get(VALUE):
            raise InvalidDescriptor(f"Missing base or value for x={key}")
        base = _parse_int(entry[BASE], f"base for x={key}")
        if not isinstance(entry[VALUE], str):
            raise InvalidDescriptor(f"Invalid value for x={key}: {entry[VALUE]!r}")
        points.append(SharePoint(x, decode(entry[VALUE], base, point=x)))

    logging.info(f"Read {len(points)} shares (n={n}, k={k}).")
    if len(points) > n:
        logging.warning(f"Descriptor declares n={n} shares but contains {len(points)}.")
    return ShareDescriptor(n, k, points)


def load_descriptor(path) -> ShareDescriptor:
    """Read and parse a share descriptor from a JSON file

    Raises:
        OSError: The file cannot be read.
        InvalidDescriptor: The file is not valid JSON in UTF-8 or malformed.
    """
    with open(path, 'r', encoding='utf-8') as fs:
        try:
            data = json.load(fs)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidDescriptor(f"Invalid JSON in {path}: {e}") from e
    return parse_descriptor(data)


def recover_from_descriptor(descriptor: ShareDescriptor, **kwargs) -> int:
    """Recover the secret of a descriptor, options as in recover_secret"""
    return recover_secret(descriptor.points, descriptor.k, **kwargs)
