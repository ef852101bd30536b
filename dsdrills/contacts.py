"""Contact records, their fixed-size binary form, and a contact book."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import Enum
from functools import partial
from os import PathLike
from typing import Union

from .seqlist import NOT_FOUND, SeqList

NAME_MAX = 100
GENDER_MAX = 4
TEL_MAX = 11
ADDR_MAX = 100

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

# name, gender, age, tel, addr, then one byte of trailing padding
_RECORD = struct.Struct(f"<{NAME_MAX}s{GENDER_MAX}si{TEL_MAX}s{ADDR_MAX}sx")
RECORD_SIZE = _RECORD.size

_TEXT_LIMITS = {
    "name": NAME_MAX,
    "gender": GENDER_MAX,
    "tel": TEL_MAX,
    "addr": ADDR_MAX,
}

PathArg = Union[str, "PathLike[str]"]


class Field(Enum):
    """Editable contact fields, numbered as in the edit menu."""

    NAME = 1
    GENDER = 2
    AGE = 3
    TEL = 4
    ADDR = 5

    @property
    def attribute(self) -> str:
        return self.name.lower()


class DuplicateContactError(ValueError):
    """Raised when a contact with the same name is already stored."""


def _encode(text: str, limit: int, label: str) -> bytes:
    if not isinstance(text, str):
        raise TypeError(f"{label} must be a string")
    data = text.encode("utf-8")
    if b"\0" in data:
        raise ValueError(f"{label} must not contain NUL characters")
    if len(data) >= limit:
        raise ValueError(f"{label} must encode to fewer than {limit} bytes")
    return data


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class Contact:
    """One person in the contact book."""

    name: str
    gender: str
    age: int
    tel: str
    addr: str

    def __post_init__(self) -> None:
        for attr, limit in _TEXT_LIMITS.items():
            _encode(getattr(self, attr), limit, attr)
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise TypeError("age must be an integer")
        if not _INT_MIN <= self.age <= _INT_MAX:
            raise ValueError("age is out of range")

    def pack(self) -> bytes:
        """Return the fixed-size binary record for this contact."""
        return _RECORD.pack(
            _encode(self.name, NAME_MAX, "name"),
            _encode(self.gender, GENDER_MAX, "gender"),
            self.age,
            _encode(self.tel, TEL_MAX, "tel"),
            _encode(self.addr, ADDR_MAX, "addr"),
        )

    @classmethod
    def unpack(cls, data: bytes) -> Contact:
        """Build a contact from one binary record."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
        name, gender, age, tel, addr = _RECORD.unpack(data)
        return cls(_decode(name), _decode(gender), age, _decode(tel), _decode(addr))

    def describe(self, number: int) -> str:
        """Return the display block for this contact as entry ``number``."""
        return "\n".join(
            (
                f"联系人{number}",
                f"姓名：{self.name}",
                f"性别：{self.gender}",
                f"年龄：{self.age}",
                f"电话：{self.tel}",
                f"地址：{self.addr}",
            )
        )


def _as_field(field: Field | int | str) -> Field:
    if isinstance(field, Field):
        return field
    if isinstance(field, bool):
        raise TypeError("field must be a Field, a menu number or a name")
    if isinstance(field, int):
        return Field(field)
    if isinstance(field, str):
        try:
            return Field[field.upper()]
        except KeyError:
            raise ValueError(f"unknown field {field!r}") from None
    raise TypeError("field must be a Field, a menu number or a name")


class ContactBook:
    """Contacts kept in insertion order, unique by name, optionally bounded."""

    def __init__(self, max_entries: int | None = None) -> None:
        self._entries: SeqList[Contact] = SeqList(max_entries)

    @property
    def max_entries(self) -> int | None:
        return self._entries.max_size

    @property
    def is_full(self) -> bool:
        limit = self.max_entries
        return limit is not None and len(self) >= limit

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._entries)

    def index_of(self, name: str) -> int:
        """Return the position of the contact called ``name``, or -1."""
        for index, contact in enumerate(self._entries):
            if contact.name == name:
                return index
        return NOT_FOUND

    def _require(self, name: str) -> int:
        index = self.index_of(name)
        if index == NOT_FOUND:
            raise KeyError(name)
        return index

    def get(self, name: str) -> Contact:
        """Return the contact called ``name``; KeyError if absent."""
        return self._entries[self._require(name)]

    def add(self, contact: Contact) -> None:
        """Append ``contact``; names must be unique and the book not full."""
        if self.index_of(contact.name) != NOT_FOUND:
            raise DuplicateContactError(f"contact {contact.name!r} already exists")
        self._entries.push_back(contact)

    def remove(self, name: str) -> Contact:
        """Remove and return the contact called ``name``."""
        return self._entries.erase(self._require(name))

    def update(self, name: str, field: Field | int | str, value: object) -> Contact:
        """Change one field of the contact called ``name`` and return it."""
        index = self._require(name)
        chosen = _as_field(field)
        if chosen is Field.AGE:
            value = int(value)  # type: ignore[call-overload]
        updated = replace(self._entries[index], **{chosen.attribute: value})
        self._entries[index] = updated
        return updated

    def save(self, path: PathArg) -> None:
        """Write every contact to ``path`` as consecutive binary records."""
        with open(path, "wb") as handle:
            for contact in self._entries:
                handle.write(contact.pack())

    def load(self, path: PathArg) -> int:
        """Append the records stored in ``path``; return how many were read.

        A trailing partial record is ignored.
        """
        count = 0
        with open(path, "rb") as handle:
            for chunk in iter(partial(handle.read, RECORD_SIZE), b""):
                if len(chunk) < RECORD_SIZE:
                    break
                self._entries.push_back(Contact.unpack(chunk))
                count += 1
        return count

    def clear(self) -> None:
        """Remove every contact."""
        self._entries.clear()