from enum import Enum
from types import MappingProxyType

class Category(Enum):
    SNOUN = "snoun"
    PNOUN = "pnoun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PREPOSITION = "preposition"
    PRONOUN = "pronoun"
    CONJUNCTION = "conjunction"
    SARTICLE = "sarticle"
    PARTICLE = "particle"
    INTERJECTION = "interjection"

    def __str__(self):
        return self.value

CATEGORIES = tuple(Category)

_C = Category

# category -> categories that may follow it
TRANSITIONS = MappingProxyType({
    _C.SNOUN:        (_C.ADVERB, _C.VERB, _C.PRONOUN, _C.CONJUNCTION),
    _C.PNOUN:        (_C.ADVERB, _C.VERB, _C.PRONOUN, _C.CONJUNCTION),
    _C.VERB:         (_C.SNOUN, _C.PNOUN, _C.PREPOSITION, _C.ADJECTIVE, _C.CONJUNCTION, _C.SARTICLE, _C.PARTICLE),
    _C.ADJECTIVE:    (_C.SNOUN, _C.PNOUN),
    _C.ADVERB:       (_C.VERB,),
    _C.PREPOSITION:  (_C.SNOUN, _C.PNOUN, _C.ADVERB, _C.ADJECTIVE, _C.VERB),
    _C.PRONOUN:      (_C.VERB, _C.ADVERB, _C.CONJUNCTION),
    _C.CONJUNCTION:  (_C.SNOUN, _C.PNOUN, _C.PRONOUN, _C.VERB, _C.SARTICLE, _C.PARTICLE),
    _C.SARTICLE:     (_C.SNOUN, _C.ADJECTIVE),
    _C.PARTICLE:     (_C.PNOUN, _C.ADJECTIVE),
    _C.INTERJECTION: (_C.SNOUN, _C.PNOUN, _C.PREPOSITION, _C.ADJECTIVE, _C.CONJUNCTION, _C.SARTICLE, _C.PARTICLE),
})

del _C

def successors(category):
    """Categories allowed to follow CATEGORY, in table order."""
    return TRANSITIONS[category]
