from dataclasses import dataclass, replace
from typing import Sequence

from .errors import ConfigError

COUNT_MAX = 99
COUNT_DEFAULT = 4
LENGTH_MAX = 99
LENGTH_DEFAULT = 5
FRAGMENT_MAX = 99
FRAGMENT_DEFAULT = 4

DEFAULT_SYMBOLS = ("!", "@", "#", "$", "%", "^", "&", "*", "(", ")", "-", "+", "_", "=")

@dataclass(frozen=True)
class GenerateOptions:
    """Passphrase generation options.  Zero or empty values mean "use the default"."""
    count: int = COUNT_DEFAULT
    length: int = LENGTH_DEFAULT
    fragment_length: int = FRAGMENT_DEFAULT
    prudish: bool = False
    no_spaces: bool = False
    add_digit: bool = False
    add_symbol: bool = False
    symbols: Sequence[str] = DEFAULT_SYMBOLS

def _bounded(name, value, maximum, default):
    if value < 0:
        raise ConfigError("{} must not be negative: {}".format(name, value))
    if value > maximum:
        raise ConfigError("{} exceeds max: {}".format(name, maximum))
    return value or default

def check_options(options=None):
    """Apply defaults and bound checks to OPTIONS; return a validated copy."""
    options = options or GenerateOptions()
    return replace(options,
                   count=_bounded("Count", options.count, COUNT_MAX, COUNT_DEFAULT),
                   length=_bounded("Length", options.length, LENGTH_MAX, LENGTH_DEFAULT),
                   fragment_length=_bounded("Fragment length", options.fragment_length,
                                            FRAGMENT_MAX, FRAGMENT_DEFAULT),
                   symbols=tuple(options.symbols or ()) or DEFAULT_SYMBOLS)
