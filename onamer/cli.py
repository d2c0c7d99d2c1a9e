#!/usr/bin/env python3
"""
onamer CLI
==========
Command-line interface for pronounceable name generation.

Usage:
    onamer -c 10 --min 2 --max 3
    onamer -L japanese -c 5 -v
    onamer --hand-balance --only-accepted -c 50
    onamer -q --seed 42
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from rich.console import Console
from rich.table import Table

from onamer import __version__, Onamer
from onamer.analyzer import AnalysisFlags, WordAnalyzer
from onamer.errors import ConfigurationError
from onamer.generators import Language
from onamer.settings import get_setting

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

LANGUAGES = [lang.value for lang in Language]

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def word(self, word: str):
        """Print a generated word; in quiet mode the bare word only."""
        print(word if self.quiet else f" * {word}")

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, headers: list, rows: list, title: str = None):
        """Print a table of rows."""
        if self.quiet:
            return

        table = Table(title=title)
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*(str(c) for c in row))
        self.console.print(table)


def setup_logging(verbose: bool = False):
    """Configure root logging from settings; --verbose forces DEBUG."""
    level = 'DEBUG' if verbose else str(get_setting('logging.level', 'WARNING')).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=get_setting('logging.format', '%(levelname)s %(name)s: %(message)s'),
    )


def print_info(args, out: Output):
    """Print the run parameters (verbose mode)."""
    out.print("INFO:")
    out.print(f"  language: {args.language}")
    out.print(f"  word_count: {args.count}w")
    out.print(f"  syllable range: from {args.min_syl} to {args.max_syl}")
    if args.hand_balance or args.smooth:
        out.print(f"  analysis: hand_balance={args.hand_balance} smoothness={args.smooth}")
    if args.seed is not None:
        out.print(f"  seed: {args.seed}")
    out.print()


def print_verdicts(words: List[str], verdicts: Dict[str, bool], out: Output):
    """Render analyzed words, one row per generated word."""
    if out.quiet:
        for word in words:
            print(f"{word}\t{'ok' if verdicts[word] else 'rejected'}")
        return

    rows = [[i, word, 'ok' if verdicts[word] else 'rejected'] for i, word in enumerate(words, 1)]
    out.table(['#', 'Word', 'Verdict'], rows, title="GENERATE")
    accepted = sum(1 for word in words if verdicts[word])
    out.print(f"{accepted}/{len(words)} accepted")


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output) -> int:
    """Generate words and optionally analyze them."""
    namer = Onamer(language=args.language, seed=args.seed)
    words = namer.generate(count=args.count,
                           min_syllables=args.min_syl,
                           max_syllables=args.max_syl,
                           needed=args.needed)

    flags = AnalysisFlags(hand_balance=args.hand_balance, smoothness=args.smooth)
    analyzer = WordAnalyzer(flags)

    if args.only_accepted:
        words = analyzer.filter_words(words)
    elif flags.any:
        print_verdicts(words, analyzer.analyze_batch(words), out)
        return EXIT_OK

    out.print("GENERATE:")
    for word in words:
        out.word(word)
    return EXIT_OK


# =============================================================================
# Parser
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='onamer',
        description='Generate pronounceable names',
    )
    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--min', dest='min_syl', type=int,
                        default=get_setting('generation.min_syllables', 2),
                        help='Minimum syllables per word (default: %(default)s)')
    parser.add_argument('--max', dest='max_syl', type=int,
                        default=get_setting('generation.max_syllables', 3),
                        help='Maximum syllables per word (default: %(default)s)')
    parser.add_argument('-c', '--count', type=int,
                        default=get_setting('generation.count', 10),
                        help='Number of words (default: %(default)s)')
    parser.add_argument('-L', '--language', type=str.lower,
                        default=get_setting('generation.language', 'english'),
                        help=f"Language model: {', '.join(LANGUAGES)} (default: %(default)s)")
    # Defaults come from settings, so each check also needs an explicit off switch
    parser.add_argument('--hand-balance', dest='hand_balance', action='store_true',
                        help='Check that adjacent letters alternate keyboard hands')
    parser.add_argument('--no-hand-balance', dest='hand_balance', action='store_false',
                        help='Disable the hand-balance check')
    parser.add_argument('--smooth', dest='smooth', action='store_true',
                        help='Check phonetic smoothness (not implemented: rejects every pair)')
    parser.add_argument('--no-smooth', dest='smooth', action='store_false',
                        help='Disable the smoothness check')
    parser.set_defaults(hand_balance=bool(get_setting('analysis.hand_balance', False)),
                        smooth=bool(get_setting('analysis.smoothness', False)))
    parser.add_argument('--only-accepted', action='store_true',
                        help='Print only words accepted by the analysis flags')
    parser.add_argument('--seed', type=int, help='Seed for reproducible output')
    parser.add_argument('--needed', help='Characters to include (accepted, not enforced yet)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show run info and debug logs')
    parser.add_argument('--quiet', '-q', action='store_true', help='Print bare words only')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger.debug("Arguments: %s", vars(args))
    out = Output(quiet=args.quiet)

    try:
        # Reject bad selectors before printing anything
        args.language = Language.parse(args.language).value
        if args.verbose:
            print_info(args, out)
        return cmd_generate(args, out)
    except ConfigurationError as e:
        out.error(str(e))
        return EXIT_CONFIG_ERROR
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return EXIT_INTERRUPTED


if __name__ == '__main__':
    sys.exit(main())
