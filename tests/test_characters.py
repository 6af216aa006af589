import pytest

from urikit import characters
from urikit.characters import CharacterClass, classify


def test_predicates_are_total_over_bytes():
    predicates = [
        characters.is_alphanumeric,
        characters.is_hexdigit,
        characters.is_mark,
        characters.is_reserved,
        characters.is_unescaped_in_uri,
        characters.is_unescaped_in_component,
    ]
    for predicate in predicates:
        for b in range(256):
            assert isinstance(predicate(b), bool)


def test_non_ascii_is_never_unescaped():
    for b in range(0x80, 0x100):
        assert classify(b) is CharacterClass.OTHER
        assert not characters.is_mark(b)
        assert not characters.is_reserved(b)


@pytest.mark.parametrize('c', "-_.!~*'()")
def test_marks(c):
    assert characters.is_mark(ord(c))
    assert classify(ord(c)) is CharacterClass.MARK


@pytest.mark.parametrize('c', ';/?:@&=+$,#')
def test_delimiters_are_kept_only_in_uris(c):
    assert characters.is_unescaped_in_uri(ord(c))
    assert not characters.is_unescaped_in_component(ord(c))
    assert classify(ord(c)) is CharacterClass.BOTH


def test_hash_is_not_reserved():
    assert not characters.is_reserved(ord('#'))


@pytest.mark.parametrize('c', ' %"<>\\^`{|}\x00\x7f')
def test_other(c):
    assert classify(ord(c)) is CharacterClass.OTHER


def test_hexdigits_are_case_insensitive():
    assert all(characters.is_hexdigit(b) for b in b'0123456789abcdefABCDEF')
    assert not characters.is_hexdigit(ord('g'))
