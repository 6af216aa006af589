from dataclasses import dataclass


class UriError(ValueError):
    """Base class for percent-decoding failures."""


@dataclass(unsafe_hash = True)
class MalformedEscape(UriError):
    """A '%' not followed by two hexadecimal digits."""
    position: int

    def __post_init__(self) -> None:
        super().__init__(self.position)

    def __str__(self) -> str:
        return f"malformed escape sequence at position {self.position}"


@dataclass(unsafe_hash = True)
class InvalidUtf8(UriError):
    """The decoded bytes do not form valid UTF-8."""
    reason: str

    def __post_init__(self) -> None:
        super().__init__(self.reason)

    def __str__(self) -> str:
        return f"invalid UTF-8 after decoding: {self.reason}"
