#!/usr/bin/env python3
"""
markovpass CLI
==============
Command-line interface for passphrase generation.

Usage:
    markovpass corpus.txt
    markovpass book1.txt book2.txt -n 5 -e 80 --show-entropy
    cat corpus.txt | markovpass -l 4 -w 6 --words
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from markovpass import __version__
from markovpass.config import GenerationConfig
from markovpass.corpus import read_corpus
from markovpass.errors import MarkovpassError
from markovpass.generator import gen_passphrases
from markovpass.settings import APP_NAME, get_setting

logger = logging.getLogger(__name__)


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output: passphrases to stdout, errors to stderr."""

    def __init__(self, precision: int = 2):
        self.precision = precision
        self.console = Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False, soft_wrap=True)

    def print(self, *args, **kwargs):
        print(*args, **kwargs)

    def error(self, msg: str):
        self.err_console.print(f"[bold red]Error:[/bold red] {escape(msg)}")

    def passphrase(self, passphrase, show_entropy: bool = False):
        if show_entropy:
            print(f"{passphrase.phrase} <{passphrase.entropy:.{self.precision}f}>")
        else:
            print(passphrase.phrase)

    def word_table(self, passphrase):
        """Render each word of a passphrase with its entropy."""
        table = Table(title=passphrase.phrase, show_footer=True)
        table.add_column("#", justify="right")
        table.add_column("Word", footer="Total")
        table.add_column("Draws", justify="right",
                         footer=str(len(passphrase.draws)))
        table.add_column("Bits", justify="right",
                         footer=f"{passphrase.entropy:.{self.precision}f}")
        for i, word in enumerate(passphrase.words, 1):
            table.add_row(str(i), word.word, str(len(word.draws)),
                          f"{word.entropy:.{self.precision}f}")
        self.console.print(table)


def configure_logging(verbose: bool = False, quiet: bool = False):
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = get_setting("logging.level", "WARNING")
    logging.basicConfig(
        level=level,
        format=get_setting("logging.format", "%(levelname)s %(name)s: %(message)s"),
        stream=sys.stderr,
    )
    logging.getLogger(APP_NAME).setLevel(level)


# =============================================================================
# Parser
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    defaults = GenerationConfig()

    parser = argparse.ArgumentParser(
        prog='markovpass',
        description='markovpass - Markov chain based passphrase generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Reads the corpus from FILE arguments, concatenated in order, or from
standard input when no FILE (or "-") is given. With no FILE on an
interactive terminal, the *.txt files installed in the markovpass data
directories (e.g. ~/.local/share/markovpass, /usr/share/markovpass) are used.

Examples:
  %(prog)s pride_and_prejudice.txt
  %(prog)s austen.txt lovecraft.txt -n 5 --show-entropy
  cat corpus.txt | %(prog)s -e 80 -l 4 --words
"""
    )

    parser.add_argument('files', nargs='*', metavar='FILE',
                        help='Corpus files (default: stdin, or the installed corpus)')
    parser.add_argument('-n', dest='count', type=int, default=defaults.count,
                        metavar='NUM',
                        help=f'Number of passphrases to generate (default: {defaults.count})')
    parser.add_argument('-e', dest='min_entropy', type=float, default=defaults.min_entropy,
                        metavar='MINENTROPY',
                        help=f'Minimum entropy in bits (default: {defaults.min_entropy:g})')
    parser.add_argument('-l', dest='ngram_length', type=int, default=defaults.ngram_length,
                        metavar='LENGTH',
                        help=f'NGram length (default: {defaults.ngram_length}, must be >= 1)')
    parser.add_argument('-w', dest='min_word_length', type=int,
                        default=defaults.min_word_length, metavar='LENGTH',
                        help=f'Minimum word length for corpus (default: {defaults.min_word_length})')
    parser.add_argument('--show-entropy', action='store_true',
                        help='Print the entropy for each passphrase')
    parser.add_argument('--words', action='store_true',
                        help='Show a per-word entropy table for each passphrase')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress warnings; only errors are logged')
    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    return parser


# =============================================================================
# Main
# =============================================================================

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose, args.quiet)
    out = Output(precision=get_setting("cli.entropy_precision", 2))

    config = GenerationConfig(
        ngram_length=args.ngram_length,
        min_word_length=args.min_word_length,
        min_entropy=args.min_entropy,
        count=args.count,
    )

    try:
        config.validate()
        text = read_corpus(args.files)
        passphrases = gen_passphrases(text, config)
    except KeyboardInterrupt:
        out.print("\nCancelled.", file=sys.stderr)
        return 130
    except MarkovpassError as e:
        out.error(str(e))
        logger.debug("Generation failed", exc_info=True)
        return 1

    for passphrase in passphrases:
        if args.words:
            out.word_table(passphrase)
        else:
            out.passphrase(passphrase, show_entropy=args.show_entropy)

    return 0


if __name__ == '__main__':
    sys.exit(main())
