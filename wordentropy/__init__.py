"""Pseudo-grammatical passphrase generation."""

from .errors import (WordEntropyError, ConfigError, LoadError, EmptyStateError,
                     MalformedLineError, RandomSourceError)
from .grammar import Category, CATEGORIES, TRANSITIONS
from .options import GenerateOptions, check_options, DEFAULT_SYMBOLS
from .wordlist import classify_tag, parse_word_table, parse_offensive_set
from .generator import (Generator, FragmentGenerator, PassphraseAssembler, SecureRandom,
                        load_generator, MAX_OFFENSIVE_RETRIES, OFFENSIVE_PLACEHOLDER)
