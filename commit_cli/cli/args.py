"""CLI Argument Parsing"""

import argparse
import argcomplete

from commit_cli import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ccm',
        description='Interactively build a conventional commit message tagged with a work item, then commit',
        epilog='Example: git add -p && ccm --prefix abc'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Rule options
    parser.add_argument('--prefix', type=str, metavar='PREFIX', help='Work item prefix, e.g. --prefix abc for abc-123 (default: proj)')
    parser.add_argument('--require-capital', action='store_true', help='Require the short description to start with an uppercase letter')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Show debug info (git timings)')

    # Setup/config
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
