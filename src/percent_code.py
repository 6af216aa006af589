from collections.abc import Iterable

from urikit.characters import COMPONENT_UNESCAPED, HASH, HEXDIGIT, RESERVED, URI_UNESCAPED
from urikit.errors import InvalidUtf8, MalformedEscape

class PercentCode:
    '''
    Percent coding operating on bytes.

    Bytes in `unescaped` are copied as is by the encoder, every other byte becomes %XX.
    The decoder leaves escape sequences that resolve to a byte in `preserved` untouched.
    '''

    def __init__(self, *, unescaped: Iterable[int], preserved: Iterable[int] = (), special: int = ord('%')):
        self.special = special
        self.unescaped = frozenset(unescaped) - {special}
        self.preserved = frozenset(preserved)

    def encode_iterable(self, it: Iterable[int]) -> Iterable[int]:
        for x in it:
            if x in self.unescaped:
                yield x
            else:
                yield self.special
                yield from f'{x:02X}'.encode()

    def decode_iterable(self, jt: Iterable[int]) -> Iterable[int]:
        """
        Resolve escape sequences, yielding decoded bytes.
        Raises MalformedEscape if a special byte is not followed by two hex digits.
        Does not check the result for UTF-8 validity.
        """
        jt = iter(jt)
        position = 0
        for b in jt:
            if b == self.special:
                digits = bytes(c for (_, c) in zip(range(2), jt))
                if len(digits) != 2 or not all(c in HEXDIGIT for c in digits):
                    raise MalformedEscape(position)
                x = int(digits, 16)
                if x in self.preserved:
                    yield b
                    yield from digits
                else:
                    yield x
                position += 3
            else:
                yield b
                position += 1

    def encode(self, xs: Iterable[int]) -> bytes:
        return bytes(self.encode_iterable(xs))

    def decode(self, xs: Iterable[int]) -> bytes:
        """
        Decode and check that the output is well-formed UTF-8.
        Raises MalformedEscape or InvalidUtf8.
        """
        buffer = bytes(self.decode_iterable(xs))
        try:
            buffer.decode('utf8')
        except UnicodeDecodeError as e:
            raise InvalidUtf8(f'{e.reason} at byte {e.start}') from e
        return buffer

# Whole URIs: delimiters stay literal, and their escapes are not resolved.
uri_code = PercentCode(unescaped = URI_UNESCAPED, preserved = RESERVED | HASH)

# Single URI components: everything but alphanumerics and marks is escaped.
uri_component_code = PercentCode(unescaped = COMPONENT_UNESCAPED)
