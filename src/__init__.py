"""Percent coding for URIs and recognition of URLs and e-mail addresses in text."""

from urikit.errors import InvalidUtf8, MalformedEscape, UriError
from urikit.result import Err, Ok, Result
from urikit.uri import (
    NO_MATCH,
    decode,
    decode_component,
    email_prefix_length,
    encode,
    encode_component,
    release,
    url_prefix_length,
)
