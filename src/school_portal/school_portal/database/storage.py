from __future__ import annotations

from typing import Iterable, Optional, Protocol


class Storage(Protocol):
    """Key-value substrate holding UTF-8 text values.

    Note (DIP): the record store depends on this interface, not on a concrete backend.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def keys(self) -> Iterable[str]:
        raise NotImplementedError
