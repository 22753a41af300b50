import pytest

from wordentropy.generator import Generator
from wordentropy.grammar import Category

# One word per category, so word draws always consume index 0
WORDLIST = """\
dog\tN
dogs\tNp
runs\tV
red\tA
quickly\tv
under\tP
she\tr
and\tC
the\tD
these\tDp
wow\t!
"""

WORDS = {
    Category.SNOUN: "dog",
    Category.PNOUN: "dogs",
    Category.VERB: "runs",
    Category.ADJECTIVE: "red",
    Category.ADVERB: "quickly",
    Category.PREPOSITION: "under",
    Category.PRONOUN: "she",
    Category.CONJUNCTION: "and",
    Category.SARTICLE: "the",
    Category.PARTICLE: "these",
    Category.INTERJECTION: "wow",
}

class ScriptedRandom:
    """Returns VALUES in order; fails the test on an out-of-range value."""

    def __init__(self, values):
        self.values = list(values)
        self.bounds = []

    def randrange(self, n):
        assert self.values, "random source exhausted"
        value = self.values.pop(0)
        assert 0 <= value < n
        self.bounds.append(n)
        return value

class FailingRandom:
    def randrange(self, n):
        raise OSError("entropy source unavailable")

@pytest.fixture
def wordlist_path(tmp_path):
    path = tmp_path / "part-of-speech.txt"
    path.write_text(WORDLIST, encoding="utf-8")
    return str(path)

@pytest.fixture
def offensive_path(tmp_path):
    path = tmp_path / "offensive.txt"
    path.write_text("dog\n  red  \n\n", encoding="utf-8")
    return str(path)

@pytest.fixture
def word_table():
    return {category: (word,) for category, word in WORDS.items()}

@pytest.fixture
def generator(word_table):
    return Generator(word_table)
