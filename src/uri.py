import logging
from typing import Union

from urikit.errors import UriError
from urikit.percent_code import PercentCode, uri_code, uri_component_code
from urikit.result import Err, Ok, Result
import urikit.scanner as scanner

logger: logging.Logger = logging.getLogger(__name__)

NO_MATCH: int = scanner.NO_MATCH

Text = Union[str, bytes]

def as_bytes(text: Text) -> bytes:
    """
    Text is taken as UTF-8.
    Lone surrogates in a str never make this fail.
    Surrogates from os.fsdecode become the bytes they stand for;
    any other lone surrogate keeps its surrogate encoding, which decoding rejects.
    """
    if isinstance(text, str):
        try:
            return text.encode('utf8', 'surrogateescape')
        except UnicodeEncodeError:
            return text.encode('utf8', 'surrogatepass')
    return bytes(text)

# Percent coding.

def encode(text: Text) -> Result:
    """
    Encode a whole URI.
    Any byte that is not a valid URI character is escaped; '#' is kept.

    Example:
        encode('foo bar') = Ok(b'foo%20bar').
    """
    return Ok(uri_code.encode(as_bytes(text)))

def encode_component(text: Text) -> Result:
    """
    Encode a URI component.
    Any byte that is not a letter, a digit, or one of -_.!~*'() is escaped.

    Example:
        encode_component('!@#$%^&*(') = Ok(b'!%40%23%24%25%5E%26*(').
    """
    return Ok(uri_component_code.encode(as_bytes(text)))

def _decode(code: PercentCode, text: Text) -> Result:
    try:
        return Ok(code.decode(as_bytes(text)))
    except UriError as e:
        logger.debug(f'Decoding failed: {e}')
        return Err(e)

def decode(text: Text) -> Result:
    """
    Decode a whole URI.
    Escape sequences resolving to reserved characters or '#' are not replaced.
    """
    return _decode(uri_code, text)

def decode_component(text: Text) -> Result:
    """
    Decode a URI component.
    All escape sequences are replaced.

    Example:
        decode_component('foo%2F%26') = Ok(b'foo/&').
    """
    return _decode(uri_component_code, text)

def release(result: Result) -> None:
    result.release()

# Prefix recognition.

def url_prefix_length(text: Text) -> int:
    """
    Does text start with a URL?
    Returns NO_MATCH if not, otherwise the length n such that text[:n] is the URL (in bytes).
    """
    return scanner.url_prefix_length(as_bytes(text))

def email_prefix_length(text: Text) -> int:
    """
    Does text start with an e-mail address?
    Returns NO_MATCH if not, otherwise the length n such that text[:n] is the address (in bytes).
    """
    return scanner.email_prefix_length(as_bytes(text))
