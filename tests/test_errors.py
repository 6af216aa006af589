import pickle

from urikit.errors import InvalidUtf8, MalformedEscape, UriError


def test_messages():
    assert str(MalformedEscape(4)) == 'malformed escape sequence at position 4'
    assert str(InvalidUtf8('bad')) == 'invalid UTF-8 after decoding: bad'


def test_hierarchy():
    assert issubclass(MalformedEscape, UriError)
    assert issubclass(InvalidUtf8, ValueError)


def test_args():
    assert MalformedEscape(4).args == (4,)
    assert InvalidUtf8(reason = 'bad').args == ('bad',)


def test_hashable():
    assert hash(MalformedEscape(4)) == hash(MalformedEscape(4))
    assert len({InvalidUtf8('bad'), InvalidUtf8('bad'), MalformedEscape(0)}) == 2


def test_pickle():
    for error in [MalformedEscape(4), InvalidUtf8('bad')]:
        copy = pickle.loads(pickle.dumps(error))
        assert copy == error
        assert str(copy) == str(error)
