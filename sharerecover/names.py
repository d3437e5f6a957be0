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
"""Static strings used in the sharerecover package

    Share descriptor

        KEYS = 'keys'

        N = 'n'

        K = 'k'

        BASE = 'base'

        VALUE = 'value'

    Radix bounds

        MIN_RADIX = 2

        MAX_RADIX = 36

    Solver backends

        BACKEND = 'backend'

        FRACTION = 'fraction'

        SYMPY = 'sympy'

        FLINT = 'flint'

    Handling of a non-integral constant term

        NON_INTEGRAL = 'non_integral'

        WARN = 'warn'

        RAISE = 'raise'

        TRUNCATE = 'truncate'
"""

KEYS = 'keys'
N = 'n'
K = 'k'
BASE = 'base'
VALUE = 'value'

MIN_RADIX = 2
MAX_RADIX = 36

BACKEND = 'backend'
FRACTION = 'fraction'
SYMPY = 'sympy'
FLINT = 'flint'
BACKENDS = (FRACTION, SYMPY, FLINT)

NON_INTEGRAL = 'non_integral'
WARN = 'warn'
RAISE = 'raise'
TRUNCATE = 'truncate'
NON_INTEGRAL_POLICIES = (WARN, RAISE, TRUNCATE)
