"""
Event entity - Participant registration on top of a Communibase record.

Responsibilities:
- Expose the event record through typed accessors
- Register participants, or re-register cancelled ones
- Cancel registrations without removing them
- Keep the participants list in the record up to date
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, NoReturn, Optional
from zoneinfo import ZoneInfo

from communibase.config import Config
from communibase.core.guard_service import RegistrationGuardService
from communibase.data_bag import DataBag
from communibase.exceptions import InvalidValueError
from communibase.events.models import Participant, Participation
from communibase.ids import CommunibaseId, CommunibaseIdCollection
from communibase.utils.dates import to_local_datetime
from communibase.utils.enums import REGISTERED_STATUSES, EventStatus, ParticipantStatus

logger = logging.getLogger(__name__)


class Event:
    """An event with a participant list, backed by a DataBag."""

    def __init__(
        self,
        event_data: Dict[str, Any],
        entity_type: Optional[str] = None,
        timezone: Optional[str] = None
    ):
        self.entity_type = entity_type or Config.EVENT_ENTITY_TYPE
        self.timezone = timezone or Config.TIMEZONE
        self.registered_statuses = REGISTERED_STATUSES
        self.data_bag = DataBag.from_entity_data(self.entity_type, event_data)

    @classmethod
    def factory(
        cls,
        event_data: Dict[str, Any],
        entity_type: Optional[str] = None,
        timezone: Optional[str] = None
    ) -> "Event":
        """
        Create an event from a Communibase record.

        Nothing is validated here; malformed values surface when the
        matching getter is called.
        """
        return cls(event_data, entity_type=entity_type, timezone=timezone)

    def get_entity_type(self) -> str:
        return self.entity_type

    def get_id(self) -> CommunibaseId:
        return CommunibaseId.from_valid_string(self._get("_id"))

    def get_status(self) -> Optional[str]:
        return self._get("status")

    def is_ready(self) -> bool:
        return self.get_status() == EventStatus.READY.value

    def get_max_participants(self) -> Optional[int]:
        """Raises InvalidValueError when the stored value is not a whole number."""
        max_participants = self._get("maxParticipants")
        if max_participants is None:
            return None
        if isinstance(max_participants, bool) or (
            isinstance(max_participants, float) and not max_participants.is_integer()
        ):
            raise InvalidValueError(f"Invalid maxParticipants found: {max_participants!r}")
        try:
            return int(max_participants)
        except (TypeError, ValueError):
            raise InvalidValueError(f"Invalid maxParticipants found: {max_participants!r}") from None

    def is_fully_booked(self) -> bool:
        max_participants = self.get_max_participants()
        if max_participants is None:
            return False
        return self.get_registered_participants_person_ids().count() >= max_participants

    def get_registered_participants_person_ids(self) -> CommunibaseIdCollection:
        return CommunibaseIdCollection.from_valid_strings(
            participant_data["personId"]
            for participant_data in self.get_participants_data()
            if participant_data.get("status") in self.registered_statuses
        )

    def get_start_date(self) -> Optional[datetime]:
        """Raises InvalidDateError when the stored value cannot be parsed."""
        return to_local_datetime(self._get("startDate"), self.timezone)

    def get_registration_start_date(self) -> Optional[datetime]:
        """Raises InvalidDateError when the stored value cannot be parsed."""
        return to_local_datetime(self._get("registrationStartDate"), self.timezone)

    def get_registration_end_date(self) -> Optional[datetime]:
        """Raises InvalidDateError when the stored value cannot be parsed."""
        return to_local_datetime(self._get("registrationEndDate"), self.timezone)

    def get_participants(self) -> List[Participation]:
        return [Participation.from_dict(data) for data in self.get_participants_data()]

    def get_participants_data(self) -> List[Dict[str, Any]]:
        return self._get("participants", [])

    def get_data(self) -> Dict[str, Any]:
        """The record as it should be persisted."""
        return self.data_bag.get_state(self.entity_type)

    def is_registered_participant(self, participant: Participant) -> bool:
        person_id = participant.get_id().to_string()
        return any(
            participant_data.get("status") in self.registered_statuses
            and participant_data.get("personId") == person_id
            for participant_data in self.get_participants_data()
        )

    def register_participant(
        self,
        participant: Participant,
        debtor_id: Optional[CommunibaseId] = None
    ) -> None:
        """
        Register a participant, or re-register a cancelled one.

        Args:
            participant: Participant to register
            debtor_id: Who pays for the participation, if not the participant

        Raises:
            ActionNotAllowedByDateError: event started or registration closed
            ActionNotAllowedError: event is not ready
            AlreadyRegisteredError: participant is already registered
            FullyBookedError: no seats left
        """
        error = RegistrationGuardService.registration_guards(self, participant, self._now())
        if error is not None:
            self._reject("register", participant, error)

        person_id = participant.get_id().to_string()
        participants_data = self.get_participants_data()
        for participant_data in participants_data:
            if participant_data.get("personId") == person_id:
                participant_data["status"] = ParticipantStatus.REGISTERED.value
                if debtor_id is not None:
                    participant_data["debtorId"] = debtor_id.to_string()
                break
        else:
            participants_data.append(Participation(
                person_id=person_id,
                status=ParticipantStatus.REGISTERED.value,
                debtor_id=None if debtor_id is None else debtor_id.to_string(),
            ).to_dict())

        self._set_participants_data(participants_data)
        logger.info("Registered participant %s for %s", person_id, self.entity_type)

    def unregister_participant(self, participant: Participant) -> None:
        """
        Cancel a participant's registration; the entry stays in the list.

        Unregistering someone who is not registered does nothing.

        Raises:
            ActionNotAllowedByDateError: event already started
        """
        error = RegistrationGuardService.unregistration_guards(self, self._now())
        if error is not None:
            self._reject("unregister", participant, error)

        person_id = participant.get_id().to_string()
        if not self.is_registered_participant(participant):
            logger.debug("Participant %s is not registered, nothing to cancel", person_id)
            return

        participants_data = self.get_participants_data()
        for participant_data in participants_data:
            if participant_data.get("personId") == person_id:
                participant_data["status"] = ParticipantStatus.CANCELLED.value

        self._set_participants_data(participants_data)
        logger.info("Cancelled participant %s for %s", person_id, self.entity_type)

    def _get(self, key: str, default: Any = None) -> Any:
        return self.data_bag.get(f"{self.entity_type}.{key}", default)

    def _set_participants_data(self, participants_data: List[Dict[str, Any]]) -> None:
        self.data_bag.set(f"{self.entity_type}.participants", participants_data)

    def _now(self) -> datetime:
        return datetime.now(ZoneInfo(self.timezone))

    def _reject(self, action: str, participant: Participant, error: Exception) -> NoReturn:
        logger.info(
            "Refused to %s participant %s: %s (%s)",
            action, participant.get_id(), error, type(error).__name__
        )
        raise error
