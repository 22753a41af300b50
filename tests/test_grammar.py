import pytest

from wordentropy.grammar import CATEGORIES, TRANSITIONS, Category, successors

def test_eleven_categories():
    assert len(CATEGORIES) == 11
    assert CATEGORIES[0] is Category.SNOUN
    assert CATEGORIES[-1] is Category.INTERJECTION

def test_every_category_has_successors():
    assert set(TRANSITIONS) == set(CATEGORIES)
    for category in CATEGORIES:
        assert successors(category)
        assert set(successors(category)) <= set(CATEGORIES)

def test_transition_table():
    assert successors(Category.ADVERB) == (Category.VERB,)
    assert successors(Category.SARTICLE) == (Category.SNOUN, Category.ADJECTIVE)
    assert successors(Category.PARTICLE) == (Category.PNOUN, Category.ADJECTIVE)
    assert successors(Category.VERB) == (Category.SNOUN, Category.PNOUN, Category.PREPOSITION,
                                         Category.ADJECTIVE, Category.CONJUNCTION,
                                         Category.SARTICLE, Category.PARTICLE)
    assert Category.INTERJECTION not in {c for succ in TRANSITIONS.values() for c in succ}

def test_transition_table_is_read_only():
    with pytest.raises(TypeError):
        TRANSITIONS[Category.ADVERB] = (Category.SNOUN,)
