import argparse
import logging
import sys

from oxforth import __version__
from oxforth.repl import repl
from oxforth.vm import VM

SOURCE_LOCATION = 'https://github.com/xSetech/OxForth'

LICENSE_NOTICE = '''\
This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, version 3 of the License. This program
comes with ABSOLUTELY NO WARRANTY.'''


def banner():
    return 'OxForth {} - {}'.format(__version__, SOURCE_LOCATION)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Interactive interpreter for a small Forth-like language',
        prog='oxforth',
        epilog=LICENSE_NOTICE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='print scan, parse, and execute details for each line')
    parser.add_argument('--version', action='store_true', help='print interpreter version and exit')
    return parser.parse_args(argv)


def cli_main(argv=None):
    args = parse_args(argv)

    if args.version:
        raise SystemExit('oxforth {}'.format(__version__))

    log_fmt = '%(message)s'
    if args.verbose:
        logging.basicConfig(format=log_fmt, level=logging.INFO, stream=sys.stdout)

    print(banner())

    vm = VM()
    vm.define_core_words()
    repl(vm)


if __name__ == '__main__':
    cli_main()
