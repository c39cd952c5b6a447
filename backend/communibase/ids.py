"""
Communibase identifiers.

Communibase documents are keyed by MongoDB ObjectIds. Entities expose them
as validated value objects so a malformed id never travels further than the
record it was read from.
"""
from typing import Any, Iterable, Iterator, List, Union

from bson import ObjectId

from communibase.exceptions import InvalidIdError


class CommunibaseId:
    """A validated 24-character hexadecimal ObjectId string."""

    __slots__ = ("_id",)

    def __init__(self, value: Union[str, ObjectId]):
        if isinstance(value, ObjectId):
            value = str(value)
        if not isinstance(value, str) or not ObjectId.is_valid(value):
            raise InvalidIdError(f"Invalid Communibase id: {value!r}")
        self._id = value

    @classmethod
    def from_valid_string(cls, value: Any) -> "CommunibaseId":
        return cls(value)

    @classmethod
    def create(cls) -> "CommunibaseId":
        return cls(str(ObjectId()))

    def to_string(self) -> str:
        return self._id

    def to_object_id(self) -> ObjectId:
        return ObjectId(self._id)

    def equals(self, other: "CommunibaseId") -> bool:
        return self == other

    def __str__(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"CommunibaseId('{self._id}')"

    def __eq__(self, other) -> bool:
        if isinstance(other, CommunibaseId):
            return self._id == other._id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._id)


class CommunibaseIdCollection:
    """Ordered collection of CommunibaseIds; duplicates are kept as given."""

    def __init__(self, ids: Iterable[CommunibaseId] = ()):
        self._ids: List[CommunibaseId] = list(ids)

    @classmethod
    def from_valid_strings(cls, values: Iterable[Any]) -> "CommunibaseIdCollection":
        return cls(CommunibaseId.from_valid_string(value) for value in values)

    def to_strings(self) -> List[str]:
        return [id_.to_string() for id_ in self._ids]

    def count(self) -> int:
        return len(self._ids)

    def is_empty(self) -> bool:
        return not self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[CommunibaseId]:
        return iter(self._ids)

    def __contains__(self, item: Union[CommunibaseId, str]) -> bool:
        if isinstance(item, str):
            return item in self.to_strings()
        return item in self._ids

    def __repr__(self) -> str:
        return f"CommunibaseIdCollection({self.to_strings()!r})"
