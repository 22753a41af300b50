import pytest

from wordentropy.errors import ConfigError
from wordentropy.options import GenerateOptions, check_options, DEFAULT_SYMBOLS

def test_defaults():
    options = check_options()
    assert (options.count, options.length, options.fragment_length) == (4, 5, 4)
    assert options.symbols == DEFAULT_SYMBOLS
    assert len(DEFAULT_SYMBOLS) == 14
    assert not (options.prudish or options.no_spaces or options.add_digit or options.add_symbol)

def test_zero_means_default():
    options = check_options(GenerateOptions(count=0, length=0, fragment_length=0, symbols=()))
    assert (options.count, options.length, options.fragment_length) == (4, 5, 4)
    assert options.symbols == DEFAULT_SYMBOLS

def test_bounds_are_inclusive():
    options = check_options(GenerateOptions(count=99, length=1, fragment_length=99))
    assert (options.count, options.length, options.fragment_length) == (99, 1, 99)

@pytest.mark.parametrize("field", ["count", "length", "fragment_length"])
@pytest.mark.parametrize("value", [100, -1])
def test_out_of_bounds(field, value):
    with pytest.raises(ConfigError):
        check_options(GenerateOptions(**{field: value}))

def test_check_options_returns_copy():
    original = GenerateOptions(count=0, symbols=["?"])
    checked = check_options(original)
    assert original.count == 0
    assert checked.count == 4
    assert checked.symbols == ("?",)

def test_missing_symbols_use_default():
    assert check_options(GenerateOptions(symbols=None)).symbols == DEFAULT_SYMBOLS
