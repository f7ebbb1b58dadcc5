from __future__ import annotations

from typing import Optional

from ..core.constants import CURRENT_USER_SLOT
from ..records.store import RecordStore
from .model import User


class SessionState:
    """The logged-in user, persisted in the ``currentUser`` slot.

    There is no expiry and no token: the slot lives until ``clear`` is called.
    """

    def __init__(self, store: RecordStore):
        self._store = store

    def current_user(self) -> Optional[User]:
        record = self._store.read_slot(CURRENT_USER_SLOT)
        return User.from_record(record) if record else None

    def set_user(self, user: User) -> None:
        self._store.write_slot(CURRENT_USER_SLOT, user.to_record())

    def clear(self) -> None:
        self._store.clear_slot(CURRENT_USER_SLOT)
