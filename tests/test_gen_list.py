import pytest

from algolab.gen_list import GenList

FIRST = "((a,b),c,d,(e,()))"
SECOND = "(a,(b,(c,d,())),c)"


@pytest.mark.parametrize("text", [FIRST, SECOND, "()", "(a)", "((()))"])
def test_round_trip(text):
    assert str(GenList(text)) == text


def test_depth_of_first_example():
    assert GenList(FIRST).depth() == 3


def test_depth_of_second_example():
    assert GenList(SECOND).depth() == 4


def test_depth_of_empty_list():
    assert GenList("()").depth() == 1


@pytest.mark.parametrize("text", [FIRST, SECOND, "()", "(a,b)"])
def test_wrapping_adds_one_level(text):
    assert GenList("(" + text + ")").depth() == GenList(text).depth() + 1


def test_default_is_empty_list():
    assert GenList() == GenList("()")


def test_whitespace_and_digits_ignored():
    assert GenList("( a , 1 , b )") == GenList("(a,b)")


def test_parsing_stops_after_closing_parenthesis():
    assert GenList("(a,b)c,d") == GenList("(a,b)")


def test_items_structure():
    items = GenList(FIRST).items
    assert items[1:3] == ("c", "d")
    assert items[0] == ("a", "b")


def test_copy_equals_original():
    original = GenList(SECOND)
    clone = original.copy()
    assert clone == original
    assert str(clone) == SECOND
    assert clone.depth() == original.depth()


def test_different_lists_unequal():
    assert not GenList(FIRST) == GenList(SECOND)


@pytest.mark.parametrize("text", ["a,b", "", " (a)"])
def test_must_start_with_parenthesis(text):
    with pytest.raises(ValueError):
        GenList(text)