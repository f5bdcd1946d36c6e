"""Standard data object: default constructor plus one setter and one getter per attribute."""

import uuid
from datetime import date
from decimal import Decimal


class Employee:

    def __init__(self):
        self._id = 0
        self._first_name = None
        self._last_name = None
        self._salary = None
        self._birth_date = None
        self._manager = False
        self._uid = None
        self._nickname = None

    def get_id(self) -> int:
        return self._id

    def set_id(self, id: int) -> None:
        self._id = id

    def get_first_name(self) -> str:
        return self._first_name

    def set_first_name(self, first_name: str) -> None:
        self._first_name = first_name

    def get_last_name(self) -> str:
        return self._last_name

    def set_last_name(self, last_name: str) -> None:
        self._last_name = last_name

    def get_salary(self) -> Decimal:
        return self._salary

    def set_salary(self, salary: Decimal) -> None:
        self._salary = salary

    def get_birth_date(self) -> date:
        return self._birth_date

    def set_birth_date(self, birth_date: date) -> None:
        self._birth_date = birth_date

    def is_manager(self) -> bool:
        return self._manager

    def set_manager(self, manager: bool) -> None:
        self._manager = manager

    def get_uid(self) -> uuid.UUID:
        return self._uid

    def set_uid(self, uid: uuid.UUID) -> None:
        self._uid = uid

    def get_nickname(self) -> str | None:
        return self._nickname

    def set_nickname(self, nickname: str | None) -> None:
        self._nickname = nickname
