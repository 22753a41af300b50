import sys
import os.path
import logging
from argparse import ArgumentParser

import xerox
from tabulate import tabulate

from time import sleep
from .generator import load_generator
from .options import GenerateOptions, COUNT_MAX, LENGTH_MAX, FRAGMENT_MAX
from .errors import WordEntropyError

logger = logging.getLogger(__name__)

def print_err(*args, **kwargs):
    kwargs.update(file=sys.stderr, flush=True)
    print(*args, **kwargs)

class PassphraseDriver(object):
    @staticmethod
    def configure_logging(args):
        level = logging.DEBUG if args.verbose else logging.WARNING
        logging.basicConfig(level=level, stream=sys.stderr,
                            format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    @staticmethod
    def check_paths(args):
        if not os.path.isfile(args.wordlist_path):
            print_err("Wordlist error: no such file: {}".format(args.wordlist_path))
            sys.exit(1)
        if not os.path.isfile(args.offensive_path):
            logger.info(
                "Offensive path error: no such file: %s; filtering disabled", args.offensive_path)
            args.prude = False
            args.offensive_path = None

    @staticmethod
    def options(args):
        return GenerateOptions(count=args.count,
                               length=args.length,
                               fragment_length=args.fragment_length,
                               prudish=args.prude,
                               no_spaces=args.no_spaces,
                               add_digit=args.add_number,
                               add_symbol=args.add_symbol)

    @staticmethod
    def print_stats(generator):
        rows = [(str(category), len(words)) for category, words in generator.get_word_table().items()]
        rows.append(("total", sum(n for _, n in rows)))
        print_err(tabulate(rows, headers=("Word type", "Words"), tablefmt="rst"))

    @staticmethod
    def gen(args):
        PassphraseDriver.check_paths(args)
        logger.info("Loading word list %s", args.wordlist_path)
        generator = load_generator(args.wordlist_path, args.offensive_path if args.prude else None)
        if args.stats:
            PassphraseDriver.print_stats(generator)
        options = PassphraseDriver.options(args)
        logger.debug("Options: %s", options)
        passphrases = generator.generate_passphrases(options)
        for passphrase in passphrases:
            print(passphrase)
        if args.clip:
            PassphraseActions.clip(passphrases[0])
        return passphrases

class PassphraseActions:
    @staticmethod
    def clip(passphrase, delay=10):
        try:
            xerox.copy(passphrase, xsel=True)
            print_err("Passphrase copied to clipboard; clearing in {} seconds.".format(delay))
            sleep(delay)
        finally:
            xerox.copy("", xsel=True)
            print_err("Clipboard cleared.")

def bounded_int(maximum):
    def parse(value):
        n = int(value)
        if not 1 <= n <= maximum:
            raise ValueError(value)
        return n
    parse.__name__ = "integer in 1..{}".format(maximum)
    return parse

def parse_args(argv=None):
    parser = ArgumentParser(description='Generate pseudo-grammatical passphrases.')
    parser.add_argument("--count", type=bounded_int(COUNT_MAX), default=1,
                        help="Number of passphrases to generate.")
    parser.add_argument("--length", type=bounded_int(LENGTH_MAX), default=4,
                        help="Number of words per passphrase.")
    parser.add_argument("--fragment-length", "--fragment_length", dest="fragment_length",
                        type=bounded_int(FRAGMENT_MAX), default=4,
                        help="Number of words per fragment before a conjunction.")
    parser.add_argument("--prude", action="store_true", help="Filter offensive words.")
    parser.add_argument("--no-spaces", "--no_spaces", dest="no_spaces", action="store_true",
                        help="No spaces between words.")
    parser.add_argument("--add-number", "--add_number", dest="add_number", action="store_true",
                        help="Add a random digit to each passphrase.")
    parser.add_argument("--add-symbol", "--add_symbol", dest="add_symbol", action="store_true",
                        help="Add a random symbol to each passphrase.")
    parser.add_argument("--wordlist-path", "--wordlist_path", dest="wordlist_path",
                        default="data/part-of-speech.txt", help="Path to POS wordlist.")
    parser.add_argument("--offensive-path", "--offensive_path", dest="offensive_path",
                        default="data/offensive.txt", help="Path to offensive wordlist (optional).")
    parser.add_argument("--clip", action="store_true",
                        help="Copy the first passphrase to the clipboard.")
    parser.add_argument("--stats", action="store_true",
                        help="Print the number of loaded words of each type.")
    parser.add_argument("--verbose", action="store_true", help="Verbose output.")
    return parser.parse_args(argv)

def run(argv=None):
    args = parse_args(argv)
    PassphraseDriver.configure_logging(args)
    try:
        PassphraseDriver.gen(args)
    except WordEntropyError as err:
        print_err("Error: {}".format(err))
        sys.exit(1)
