"""Parsing of part-of-speech word lists and offensive-word lists.

The word list follows the moby/aspell ``part-of-speech`` format: one entry per
line, ``word<TAB>tags``, where each tag character names a part of speech
(``N`` noun, ``p`` plural, ``V`` verb, ``A`` adjective, ...).  Tags are not
mutually exclusive, so classification walks a fixed priority chain and the
first matching rule wins.
"""

import logging

from .errors import LoadError, MalformedLineError
from .grammar import CATEGORIES, Category

logger = logging.getLogger(__name__)

# "p" is the plural tag of the format; "P" is also honoured for older lists
PLURAL_MARKERS = "pP"

# (markers, singular category, plural category or None), in priority order
CLASSIFICATION_RULES = (
    ("DI", Category.SARTICLE, Category.PARTICLE),
    ("Nho", Category.SNOUN, Category.PNOUN),
    ("Vti", Category.VERB, None),
    ("A", Category.ADJECTIVE, None),
    ("v", Category.ADVERB, None),
    ("C", Category.CONJUNCTION, None),
    ("pP", Category.PREPOSITION, None),
    ("r", Category.PRONOUN, None),
    ("!", Category.INTERJECTION, None),
)

def _contains_any(tag, markers):
    return any(marker in tag for marker in markers)

def is_plural(tag):
    """Plurality only applies to nouns, determiners and indefinite articles."""
    return _contains_any(tag, "NDI") and _contains_any(tag, PLURAL_MARKERS)

def classify_tag(tag):
    """Return the category of a part-of-speech TAG, or None if no rule matches."""
    plural = is_plural(tag)
    for markers, singular, plural_category in CLASSIFICATION_RULES:
        if _contains_any(tag, markers):
            return plural_category if (plural and plural_category) else singular
    return None

def decode_line(line):
    """Decode a raw UTF-8 LINE; str lines pass through unchanged."""
    if isinstance(line, str):
        return line
    try:
        return line.decode("utf-8")
    except UnicodeDecodeError as err:
        raise MalformedLineError("Undecodable line: {!r} ({})".format(line, err)) from err

def parse_line(line):
    """Parse one word-list LINE (str or UTF-8 bytes) into a ``(word, category)`` pair.

    Raises MalformedLineError for undecodable lines, lines without exactly two
    tab-separated fields, with an unknown tag, or with an empty word."""
    line = decode_line(line)
    fields = line.rstrip("\r\n").split("\t")
    if len(fields) != 2:
        raise MalformedLineError("Bad field count: {}, line: {!r}".format(len(fields), line))
    word, tag = fields
    category = classify_tag(tag)
    if category is None:
        raise MalformedLineError("Unknown word type! word: {!r}; pos: {!r}".format(word, tag))
    if not word:
        raise MalformedLineError("Zero length word: line: {!r} (interpreted type: {})".format(line, category))
    return word, category

def parse_word_table(lines):
    """Build a word table (category -> tuple of words) from LINES.

    Malformed lines are logged and skipped.  Every category is present in the
    result, possibly with no words."""
    table = {category: [] for category in CATEGORIES}
    skipped = 0
    for line in lines:
        try:
            word, category = parse_line(line)
        except MalformedLineError as err:
            logger.debug("Skipping word-list line: %s", err)
            skipped += 1
            continue
        table[category].append(word)
    if skipped:
        logger.info("Skipped %d malformed word-list lines", skipped)
    return {category: tuple(words) for category, words in table.items()}

def parse_offensive_set(lines):
    offensive = set()
    for line in lines:
        try:
            offensive.add(decode_line(line).strip())
        except MalformedLineError as err:
            logger.debug("Skipping offensive-list line: %s", err)
    return frozenset(offensive)

def _read_with(path, parser):
    try:
        with open(path, "rb") as f:
            return parser(f)
    except OSError as err:
        raise LoadError("Could not read {}: {}".format(path, err)) from err

def load_word_table(path):
    table = _read_with(path, parse_word_table)
    logger.info("Loaded %d words from %s", sum(len(words) for words in table.values()), path)
    return table

def load_offensive_set(path):
    offensive = _read_with(path, parse_offensive_set)
    logger.info("Loaded %d offensive words from %s", len(offensive), path)
    return offensive
