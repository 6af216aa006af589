from dataclasses import dataclass
from typing import NoReturn, Optional, Union

from urikit.errors import UriError


class ReleasedError(RuntimeError):
    pass


class _Scoped:
    """
    Results are released at the end of a with block, or explicitly by release().
    A released result no longer gives access to its payload.
    Releasing twice is harmless.
    """

    def release(self) -> None:
        self._payload = None

    @property
    def released(self) -> bool:
        return self._payload is None

    def _get(self):
        if self._payload is None:
            raise ReleasedError(f'{type(self).__name__} result already released')
        return self._payload

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()


@dataclass(repr = False, eq = False)
class Ok(_Scoped):
    """Successful result owning the output buffer."""
    _payload: Optional[bytes]

    ok = True

    @property
    def buffer(self) -> bytes:
        return self._get()

    @property
    def text(self) -> str:
        return self.buffer.decode('utf8')

    def unwrap(self) -> bytes:
        return self.buffer

    def __eq__(self, other) -> bool:
        return isinstance(other, Ok) and self._payload == other._payload

    def __repr__(self) -> str:
        return f'Ok({self._payload!r})'


@dataclass(repr = False, eq = False)
class Err(_Scoped):
    """Failed result owning the error."""
    _payload: Optional[UriError]

    ok = False

    @property
    def error(self) -> UriError:
        return self._get()

    @property
    def message(self) -> str:
        return str(self.error)

    def unwrap(self) -> NoReturn:
        raise self.error

    def __eq__(self, other) -> bool:
        return isinstance(other, Err) and self._payload == other._payload

    def __repr__(self) -> str:
        return f'Err({self._payload!r})'


Result = Union[Ok, Err]
