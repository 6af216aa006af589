import enum
import string

def byte_set(chars: str) -> frozenset[int]:
    return frozenset(chars.encode('ascii'))

ALPHA: frozenset[int] = byte_set(string.ascii_letters)
DIGIT: frozenset[int] = byte_set(string.digits)
ALPHANUMERIC: frozenset[int] = ALPHA | DIGIT
HEXDIGIT: frozenset[int] = byte_set(string.hexdigits)

# Unreserved marks, safe in every context.
MARK: frozenset[int] = byte_set("-_.!~*'()")

# Delimiters escaped in components but kept in whole URIs.
RESERVED: frozenset[int] = byte_set(';/?:@&=+$,')
HASH: frozenset[int] = byte_set('#')

URI_UNESCAPED: frozenset[int] = ALPHANUMERIC | MARK | RESERVED | HASH
COMPONENT_UNESCAPED: frozenset[int] = ALPHANUMERIC | MARK

# Sentence punctuation trimmed from the end of a recognized URL or address.
SENTENCE_PUNCTUATION: frozenset[int] = byte_set('.,;:!?')

class CharacterClass(enum.Enum):
    MARK = 'mark'
    BOTH = 'both'
    OTHER = 'other'

def is_alphanumeric(b: int) -> bool:
    return b in ALPHANUMERIC

def is_hexdigit(b: int) -> bool:
    return b in HEXDIGIT

def is_mark(b: int) -> bool:
    return b in MARK

def is_reserved(b: int) -> bool:
    return b in RESERVED

def is_unescaped_in_uri(b: int) -> bool:
    return b in URI_UNESCAPED

def is_unescaped_in_component(b: int) -> bool:
    return b in COMPONENT_UNESCAPED

def classify(b: int) -> CharacterClass:
    """
    Classify a byte by its escaping behaviour.
    Alphanumerics and marks are never escaped (MARK).
    Reserved characters and '#' are kept in URIs but escaped in components (BOTH);
    no byte is reserved without also being unescaped in whole URIs.
    Everything else, including all bytes outside ASCII, is always escaped (OTHER).
    """
    if b in COMPONENT_UNESCAPED:
        return CharacterClass.MARK
    if b in URI_UNESCAPED:
        return CharacterClass.BOTH
    return CharacterClass.OTHER
