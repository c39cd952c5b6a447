"""Event participation schemas."""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from communibase.ids import CommunibaseId


class Participant(Protocol):
    """Anything that can take part in an event: it only needs an id."""

    def get_id(self) -> CommunibaseId:
        ...


@dataclass
class Participation:
    person_id: str
    status: str
    debtor_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participation":
        return cls(
            person_id=data.get("personId"),
            status=data.get("status"),
            debtor_id=data.get("debtorId"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "personId": self.person_id,
            "status": self.status,
            "debtorId": self.debtor_id,
        }
