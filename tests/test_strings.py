import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.strings import change_case, check_palindrome, name_length, reverse_name


@given(st.text(alphabet=st.characters(blacklist_characters="\0"), max_size=40))
def test_name_length_without_nul(name):
    assert name_length(name) == len(name)


def test_name_length_stops_at_nul():
    assert name_length("ab\0cd") == 2


@given(st.text(max_size=40))
def test_reverse_name_property(name):
    assert reverse_name(name) == name[::-1]
    assert reverse_name(reverse_name(name)) == name


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_change_case_upper(ch):
    assert change_case(ch) == ch.lower()


@pytest.mark.parametrize("ch", string.ascii_lowercase + string.digits + " $@")
def test_change_case_leaves_others(ch):
    assert change_case(ch) == ch


@pytest.mark.parametrize("bad", ["", "ab"])
def test_change_case_requires_single_char(bad):
    with pytest.raises(ValueError):
        change_case(bad)


def test_check_palindrome_source_example():
    assert check_palindrome("c1 O$d@eeD o1c") is True


def test_check_palindrome_rejects():
    assert check_palindrome("race a car") is False


@given(st.text(max_size=40))
def test_check_palindrome_mirrored(text):
    assert check_palindrome(text + text[::-1]) is True


@given(st.text(alphabet=string.ascii_letters + string.digits, max_size=30))
def test_check_palindrome_alnum_matches_lowered(text):
    lowered = text.lower()
    assert check_palindrome(text) == (lowered == lowered[::-1])