import enum
import logging
from dataclasses import dataclass
from typing import Iterable

from urikit.characters import ALPHA, ALPHANUMERIC, HEXDIGIT, SENTENCE_PUNCTUATION, URI_UNESCAPED, byte_set

logger: logging.Logger = logging.getLogger(__name__)

NO_MATCH: int = -1

SCHEMES: frozenset[bytes] = frozenset([
    b'http', b'https', b'ftp', b'ftps', b'gopher', b'mailto',
    b'news', b'nntp', b'telnet', b'wais', b'file', b'prospero',
])

SCHEME_CHARS: frozenset[int] = ALPHANUMERIC | byte_set('+-.')

# Besides the unescaped URI characters, brackets may appear in a URL body (IPv6 hosts).
URL_BODY_CHARS: frozenset[int] = URI_UNESCAPED | byte_set('[]')

LOCAL_PART_CHARS: frozenset[int] = ALPHANUMERIC | byte_set('._-+')

def trim_punctuation(s: bytes, start: int, end: int) -> int:
    """Move end back over trailing sentence punctuation, but not past start."""
    while end > start and s[end - 1] in SENTENCE_PUNCTUATION:
        end -= 1
    return end

# URL prefixes.

class UrlState(enum.Enum):
    SCHEME = enum.auto()
    BODY = enum.auto()
    ESCAPE_HIGH = enum.auto()
    ESCAPE_LOW = enum.auto()

def url_prefix_length(s: bytes, start: int = 0) -> int:
    """
    Length of the longest URL at offset start of s, or NO_MATCH.

    A URL is a recognized scheme (case-insensitive), a colon, and a non-empty body.
    The body extends over URI characters and complete %XX escapes.
    Trailing sentence punctuation is not part of the URL.

    Example:
        url_prefix_length(b'http://example.com/a.html, see') = 25.
    """
    state = UrlState.SCHEME
    body_start = None
    # End of the body up to the last complete character or escape.
    end = start
    i = start
    while i < len(s):
        c = s[i]
        if state is UrlState.SCHEME:
            if c == ord(':'):
                if s[start:i].lower() not in SCHEMES:
                    return NO_MATCH
                body_start = end = i + 1
                state = UrlState.BODY
            elif c in ALPHA or (i > start and c in SCHEME_CHARS):
                pass
            else:
                return NO_MATCH
        elif state is UrlState.BODY:
            if c == ord('%'):
                state = UrlState.ESCAPE_HIGH
            elif c in URL_BODY_CHARS:
                end = i + 1
            else:
                break
        elif state is UrlState.ESCAPE_HIGH:
            if c not in HEXDIGIT:
                break
            state = UrlState.ESCAPE_LOW
        elif state is UrlState.ESCAPE_LOW:
            if c not in HEXDIGIT:
                break
            end = i + 1
            state = UrlState.BODY
        i += 1

    if body_start is None:
        return NO_MATCH
    end = trim_punctuation(s, body_start, end)
    if end == body_start:
        return NO_MATCH
    return end - start

# E-mail address prefixes.

class EmailState(enum.Enum):
    LOCAL = enum.auto()
    LABEL_START = enum.auto()
    LABEL = enum.auto()

def email_prefix_length(s: bytes, start: int = 0) -> int:
    """
    Length of the longest e-mail address at offset start of s, or NO_MATCH.

    The local part consists of alphanumerics and ._-+ and is followed by '@'.
    The domain consists of at least two dot-separated labels of alphanumerics and '-'.
    A label does not start or end with '-'.
    Matching continues greedily through all available labels.

    Example:
        email_prefix_length(b'john.doe@example.org.') = 20.
    """
    state = EmailState.LOCAL
    dots = 0
    # End of the domain after the last complete label following a dot.
    end = None
    for i in range(start, len(s)):
        c = s[i]
        if state is EmailState.LOCAL:
            if c == ord('@') and i > start:
                domain_start = i + 1
                state = EmailState.LABEL_START
            elif c not in LOCAL_PART_CHARS:
                return NO_MATCH
        elif state is EmailState.LABEL_START:
            if c not in ALPHANUMERIC:
                break
            if dots:
                end = i + 1
            state = EmailState.LABEL
        elif state is EmailState.LABEL:
            if c in ALPHANUMERIC:
                if dots:
                    end = i + 1
            elif c == ord('-'):
                pass
            elif c == ord('.') and s[i - 1] != ord('-'):
                dots += 1
                state = EmailState.LABEL_START
            else:
                break

    if end is None:
        return NO_MATCH
    return trim_punctuation(s, domain_start, end) - start

# Scanning text.

class MatchKind(enum.Enum):
    URL = 'url'
    EMAIL = 'email'

@dataclass(frozen = True)
class Match:
    kind: MatchKind
    start: int
    end: int

    def slice(self, s: bytes) -> bytes:
        return s[self.start:self.end]

# Bytes after which a match would start in the middle of a word.
WORD_CHARS: frozenset[int] = ALPHANUMERIC | byte_set('._-+@/%')

def iter_matches(s: bytes, kinds: Iterable[MatchKind] = tuple(MatchKind)) -> Iterable[Match]:
    """
    Iterate over the URLs and e-mail addresses found in s.
    Matches are only attempted at the start of a word.
    At each position, URLs are tried before e-mail addresses.
    """
    kinds = frozenset(kinds)
    scanners = [
        (kind, scanner)
        for (kind, scanner) in [(MatchKind.URL, url_prefix_length), (MatchKind.EMAIL, email_prefix_length)]
        if kind in kinds
    ]
    i = 0
    while i < len(s):
        if i == 0 or s[i - 1] not in WORD_CHARS:
            for (kind, scanner) in scanners:
                n = scanner(s, i)
                if n != NO_MATCH:
                    match = Match(kind, i, i + n)
                    logger.debug(f'Found {kind.value} at {match.start}:{match.end}.')
                    yield match
                    i += n
                    break
            else:
                i += 1
        else:
            i += 1

def find_urls(s: bytes) -> list[bytes]:
    return [m.slice(s) for m in iter_matches(s, [MatchKind.URL])]

def find_emails(s: bytes) -> list[bytes]:
    return [m.slice(s) for m in iter_matches(s, [MatchKind.EMAIL])]
