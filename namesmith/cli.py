#!/usr/bin/env python3
"""
Namesmith CLI
=============
Command-line interface for word generation and phonology inspection.

Usage:
    namesmith generate -n 10
    namesmith generate -p sylvan -a "+ka,-a͡i" --seed 7
    namesmith generate -p ./my_language.json -d
    namesmith phonology english
    namesmith phonologies
"""

import argparse
import json
import sys

from namesmith import __version__
from namesmith.errors import NamesmithError
from namesmith import settings

AFFIX_FLAGS = ('-a', '--affixes')

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self._console = None

    @property
    def console(self):
        if self._console is None:
            from namesmith.ui import make_console
            self._console = make_console()
        return self._console

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def result(self, text: str):
        """Print a result line; shown even in quiet mode."""
        print(text)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def render(self, renderable):
        """Print a rich renderable."""
        self.console.print(renderable)


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate words."""
    from namesmith.config import load_phonology, parse_affix_list
    from namesmith.generators import AffixSet, NameGenerator, RandomSource
    from namesmith.ui import configure_logging, words_table

    configure_logging(debug=args.debug)

    if args.count < 0:
        out.error("--count must be zero or more")
        return 1

    descriptor = load_phonology(args.phonology)
    affixes = AffixSet.from_strings(parse_affix_list(args.affixes))
    generator = NameGenerator(descriptor, affixes=affixes, rng=RandomSource(args.seed))

    words = generator.generate(args.count)

    if args.json:
        out.result(json.dumps([w.to_dict() for w in words], ensure_ascii=False, indent=2))
    elif args.verbose:
        out.render(words_table(words))
    else:
        line_format = settings.line_format()
        for word in words:
            out.result(word.format(line_format))
    return 0


def cmd_phonology(args, out: Output):
    """Show a phonology's inventories and rules."""
    from namesmith.config import load_phonology
    from namesmith.ui import phonology_view

    descriptor = load_phonology(args.phonology)
    out.render(phonology_view(descriptor))
    return 0


def cmd_phonologies(args, out: Output):
    """List bundled phonologies."""
    from namesmith.phonologies import list_phonologies
    from namesmith.ui import phonologies_table

    names = list_phonologies()
    if args.plain:
        for name in names:
            out.result(name)
    else:
        out.render(phonologies_table(names))
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='namesmith',
        description='Namesmith - Constructed-Language Word Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -n 10
  %(prog)s generate -p sylvan -a "+ka,-a͡i" --seed 7
  %(prog)s generate -p sylvan -a "-ta,-an"
  %(prog)s generate -p sylvan --affixes=-ta
  %(prog)s generate -p ./my_language.json -d
  %(prog)s phonology english
  %(prog)s phonologies
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    default_count = settings.default_word_count()
    default_phonology = settings.default_phonology()

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate words')
    p.add_argument('-n', '--count', type=int, default=default_count,
                   help=f'Number of words (default: {default_count})')
    p.add_argument('-p', '--phonology', default=default_phonology,
                   help=f'Phonology file or bundled name (default: {default_phonology})')
    p.add_argument('-a', '--affixes', default='',
                   help='Comma-separated affixes: +prefix, -suffix (e.g. "+ka,-a͡i"); '
                        'a list starting with "-" is taken as-is (-a -ta or --affixes=-ta)')
    p.add_argument('-d', '--debug', action='store_true', help='Trace generation on stderr')
    p.add_argument('--seed', type=int, help='Seed for a reproducible batch')
    p.add_argument('--verbose', '-v', action='store_true', help='Show a detailed table')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- phonology ---
    p = subparsers.add_parser('phonology', aliases=['ph'], help='Show a phonology')
    p.add_argument('phonology', nargs='?', default=default_phonology,
                   help=f'Phonology file or bundled name (default: {default_phonology})')

    # --- phonologies ---
    p = subparsers.add_parser('phonologies', help='List bundled phonologies')
    p.add_argument('--plain', action='store_true', help='One name per line')

    return parser


def attach_affix_values(argv: list) -> list:
    """
    Glue the value of -a/--affixes onto its flag.

    Suffix lists start with "-" and would otherwise be read as an option.
    """
    result = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in AFFIX_FLAGS and i + 1 < len(argv):
            result.append(f"--affixes={argv[i + 1]}")
            i += 2
            continue
        result.append(arg)
        i += 1
    return result


def main(argv=None):
    try:
        parser = build_parser()
    except NamesmithError as e:
        Output().error(str(e))
        return 1
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(attach_affix_values(list(argv)))

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'ph': 'phonology',
    }
    command = cmd_map.get(args.command, args.command)

    # Output handler
    out = Output(quiet=getattr(args, 'quiet', False))

    # Dispatch
    commands = {
        'generate': cmd_generate,
        'phonology': cmd_phonology,
        'phonologies': cmd_phonologies,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except NamesmithError as e:
            out.error(str(e))
            if getattr(args, 'debug', False):
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
