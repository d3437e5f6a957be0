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
"""Command line interface: recover the secret of a share descriptor"""

from argparse import ArgumentParser
from argparse import RawDescriptionHelpFormatter
import contextlib
import json
import logging
import sys

from sharerecover import DisableLogger
from sharerecover.names import *
from sharerecover.errors import SecretRecoveryError
from sharerecover.descriptor import load_descriptor, recover_from_descriptor


def start(descriptor_file, backend=FRACTION, non_integral=WARN):
    """Load the descriptor, recover the secret and print it as c="<secret>" """
    descriptor = load_descriptor(descriptor_file)
    secret = recover_from_descriptor(descriptor, **{BACKEND: backend, NON_INTEGRAL: non_integral})
    print(f'c="{secret}"')
    return secret


def main(argv=None):
    usage = '''usage: sharerecover <descriptor.json> [--backend fraction|sympy|flint] [--non-integral warn|raise|truncate]'''
    parser = ArgumentParser(prog='sharerecover',
                            description='Recovers the secret (constant term) of a threshold secret sharing\n'
                                        'from the shares listed in a JSON descriptor',
                            epilog=usage,
                            formatter_class=RawDescriptionHelpFormatter)
    parser.add_argument("descriptor", help="JSON file with the keys n, k and the shares")
    parser.add_argument("--backend", choices=BACKENDS, default=FRACTION, help="exact linear solver to use")
    parser.add_argument("--non-integral", choices=NON_INTEGRAL_POLICIES, default=WARN,
                        help="how to treat a constant term that is not an integer")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action='store_true', help="log progress information")
    verbosity.add_argument("-q", "--quiet", action='store_true', help="disable all logging")

    argv = sys.argv[1:] if argv is None else argv
    if len(argv) == 0:
        parser.print_help(sys.stderr)
        return 1

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format='%(levelname)s: %(message)s')
    with DisableLogger() if args.quiet else contextlib.nullcontext():
        try:
            start(args.descriptor, args.backend, args.non_integral)
        except (SecretRecoveryError, OSError, json.JSONDecodeError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
