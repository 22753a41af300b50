import logging
import random
import threading
from types import MappingProxyType

from .errors import EmptyStateError, RandomSourceError, LoadError
from .grammar import CATEGORIES, Category, successors
from .options import check_options
from .wordlist import load_word_table, load_offensive_set

logger = logging.getLogger(__name__)

MAX_OFFENSIVE_RETRIES = 10
OFFENSIVE_PLACEHOLDER = ""
DIGITS = "0123456789"

class SecureRandom:
    """Uniform choices backed by the operating system's entropy source."""

    def __init__(self):
        self.rng = random.SystemRandom()

    def randrange(self, n):
        return self.rng.randrange(n)

def draw_index(rng, n):
    """Draw an index in [0, N) from RNG, reporting source failures as RandomSourceError."""
    try:
        return rng.randrange(n)
    except RandomSourceError:
        raise
    except (OSError, NotImplementedError) as err:
        raise RandomSourceError("Cannot get random integer: {}".format(err)) from err

def choice(rng, seq):
    return seq[draw_index(rng, len(seq))]

class FragmentGenerator:
    def __init__(self, word_table, offensive=frozenset(), rng=None, prudish=False):
        self.word_table = word_table
        self.offensive = offensive
        self.rng = rng or SecureRandom()
        self.prudish = prudish

    def draw_word(self, category):
        words = self.word_table.get(category)
        if words is None:
            raise EmptyStateError("Word table has no entry for category {}".format(category))
        if not words:
            raise EmptyStateError("No words of type {} loaded".format(category))
        return choice(self.rng, words)

    def random_word(self, category):
        """Draw a word of CATEGORY.
        When prudish, offensive words are redrawn up to MAX_OFFENSIVE_RETRIES
        times before giving up and returning OFFENSIVE_PLACEHOLDER."""
        word = self.draw_word(category)
        if not (self.prudish and word in self.offensive):
            return word
        logger.debug("Got offensive word: %s", word)
        for _ in range(MAX_OFFENSIVE_RETRIES):
            word = self.draw_word(category)
            if word not in self.offensive:
                return word
            logger.debug("Got offensive word (retry): %s", word)
        logger.warning("Gave up trying to get a non-offensive %s", category)
        return OFFENSIVE_PLACEHOLDER

    def next_category(self, category):
        allowed = successors(category)
        if len(allowed) > 1:
            return choice(self.rng, allowed)
        return allowed[0]

    def generate_fragment(self, fragment_length):
        """Random walk of FRAGMENT_LENGTH words over the transition grammar."""
        category = choice(self.rng, CATEGORIES)
        fragment = [self.random_word(category)]
        for _ in range(1, fragment_length):
            category = self.next_category(category)
            fragment.append(self.random_word(category))
        return fragment

class PassphraseAssembler:
    def __init__(self, fragments):
        self.fragments = fragments

    @property
    def rng(self):
        return self.fragments.rng

    def generate_words(self, length, fragment_length):
        """Fragments joined by conjunctions; at least LENGTH + 1 words long."""
        words = self.fragments.generate_fragment(fragment_length)
        for _ in range(length // fragment_length):
            words.append(self.fragments.random_word(Category.CONJUNCTION))
            words.extend(self.fragments.generate_fragment(fragment_length))
        return words

    def generate_passphrase(self, options):
        # Drawn "words" may be multi-word idioms: truncate on final tokens.
        tokens = " ".join(self.generate_words(options.length, options.fragment_length)).split(" ")
        tokens = tokens[:options.length + 1]
        passphrase = ("" if options.no_spaces else " ").join(tokens).strip()
        if options.add_digit:
            passphrase += choice(self.rng, DIGITS)
        if options.add_symbol:
            passphrase += choice(self.rng, options.symbols)
        return passphrase

def normalize_word_table(word_table):
    return MappingProxyType({category: tuple(word_table.get(category, ()))
                             for category in CATEGORIES})

class Generator:
    """Loaded word lists plus the request-level generation entry point.

    After loading, the tables are read-only; concurrent generate calls need
    no locking.  Loading itself is serialized by a lock."""

    def __init__(self, word_table=None, offensive=(), rng=None):
        self.word_table = normalize_word_table(word_table or {})
        self.offensive = frozenset(offensive)
        self.rng = rng or SecureRandom()
        self.lock = threading.Lock()

    def load_words(self, wordlist_path, offensive_path=None):
        if not wordlist_path:
            raise LoadError("Wordlist path is required")
        with self.lock:
            word_table = load_word_table(wordlist_path)
            offensive = load_offensive_set(offensive_path) if offensive_path else frozenset()
            self.word_table = normalize_word_table(word_table)
            self.offensive = offensive

    def has_words(self):
        return any(self.word_table.values())

    def get_word_table(self):
        return self.word_table

    def assembler(self, options):
        fragments = FragmentGenerator(self.word_table, self.offensive, self.rng, options.prudish)
        return PassphraseAssembler(fragments)

    def generate_passphrases(self, options=None):
        """Generate OPTIONS.count passphrases."""
        if not self.has_words():
            raise EmptyStateError("Empty wordlist, call load_words() first")
        options = check_options(options)
        assembler = self.assembler(options)
        return [assembler.generate_passphrase(options) for _ in range(options.count)]

def load_generator(wordlist_path, offensive_path=None, rng=None):
    """Load WORDLIST_PATH (and optionally OFFENSIVE_PATH) into a new Generator."""
    generator = Generator(rng=rng)
    generator.load_words(wordlist_path, offensive_path)
    return generator
