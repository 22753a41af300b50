class WordEntropyError(Exception):
    pass

class ConfigError(WordEntropyError):
    """An option value is outside its documented bounds."""

class LoadError(WordEntropyError):
    """A word list could not be opened or read."""

class EmptyStateError(WordEntropyError):
    """Generation needs words that are not loaded."""

class MalformedLineError(WordEntropyError):
    """A word-list line does not parse.  Loaders skip such lines."""

class RandomSourceError(WordEntropyError):
    """The secure random source failed to produce a value."""
