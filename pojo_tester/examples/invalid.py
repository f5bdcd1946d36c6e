"""Data object with a defective setter."""

import uuid
from datetime import date


class Invalid:

    def __init__(self):
        self._id = 0
        self._name = None
        self._weight = None
        self._birth_date = None
        self._manager = False
        self._uid = None

    def get_id(self) -> int:
        return self._id

    def set_id(self, id: int) -> None:
        self._id = id

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name + " foo"  # BUG simulation

    def get_birth_date(self) -> date:
        return self._birth_date

    def set_birth_date(self, birth_date: date) -> None:
        self._birth_date = birth_date

    def is_manager(self) -> bool:  # "is" getter
        return self._manager

    def set_manager(self, manager: bool) -> None:
        self._manager = manager

    def get_weight(self) -> float:
        return self._weight

    def set_weight(self, weight: float) -> None:
        self._weight = weight

    def get_uid(self) -> uuid.UUID:
        return self._uid

    def set_uid(self, uid: uuid.UUID) -> None:
        self._uid = uid
