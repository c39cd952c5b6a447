"""
Registration Guard Service - Business rules for (un)registering participants.

Responsibilities:
- Refuse changes once an event has started
- Only accept registrations for events that are ready
- Enforce the registration window
- Refuse duplicate registrations
- Enforce the participant limit

Every guard returns the error it would raise, or None when the rule passes.
The entity raises the first error found, so no guard mutates anything.
"""
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from communibase.exceptions import (
    ActionNotAllowedByDateError,
    ActionNotAllowedError,
    AlreadyRegisteredError,
    FullyBookedError,
    InvalidDateError,
    RegistrationError,
)

if TYPE_CHECKING:
    from communibase.events.event import Event
    from communibase.events.models import Participant


class RegistrationGuardService:
    """Guards checked before a participant list is changed."""

    @classmethod
    def guard_not_started(cls, event: "Event", now: datetime) -> Optional[RegistrationError]:
        """
        An event that has started can no longer be changed.

        A start date that cannot be parsed counts as started.
        """
        try:
            start_date = event.get_start_date()
        except InvalidDateError as e:
            error = ActionNotAllowedByDateError("Event is already started.")
            error.__cause__ = e
            error.__suppress_context__ = True
            return error

        if start_date is not None and now >= start_date:
            return ActionNotAllowedByDateError("Event is already started.")
        return None

    @classmethod
    def guard_event_ready(cls, event: "Event") -> Optional[RegistrationError]:
        if not event.is_ready():
            return ActionNotAllowedError("Event status is not ready.")
        return None

    @classmethod
    def guard_registration_open(cls, event: "Event", now: datetime) -> Optional[RegistrationError]:
        """
        Registration is only possible between the registration start and end dates.

        Either bound is optional. A bound that cannot be parsed closes
        registration.
        """
        try:
            registration_start_date = event.get_registration_start_date()
            if registration_start_date is not None and now < registration_start_date:
                return ActionNotAllowedByDateError(
                    f"Registration starts on {registration_start_date.isoformat()}"
                )

            registration_end_date = event.get_registration_end_date()
            if registration_end_date is not None and now > registration_end_date:
                return ActionNotAllowedByDateError(
                    f"Registration ended on {registration_end_date.isoformat()}"
                )
        except InvalidDateError as e:
            error = ActionNotAllowedByDateError("Invalid date found.")
            error.__cause__ = e
            error.__suppress_context__ = True
            return error
        return None

    @classmethod
    def guard_not_registered(
        cls,
        event: "Event",
        participant: "Participant"
    ) -> Optional[RegistrationError]:
        if event.is_registered_participant(participant):
            return AlreadyRegisteredError("Participant is already registered.")
        return None

    @classmethod
    def guard_not_fully_booked(cls, event: "Event") -> Optional[RegistrationError]:
        if event.is_fully_booked():
            return FullyBookedError("Event is fully booked.")
        return None

    @classmethod
    def registration_guards(
        cls,
        event: "Event",
        participant: "Participant",
        now: datetime
    ) -> Optional[RegistrationError]:
        """
        Run all registration guards in order.

        Args:
            event: Event the participant wants to join
            participant: Participant to register
            now: Moment of the registration, in the event's timezone

        Returns:
            The first failing guard's error, or None when registration is allowed
        """
        return (
            cls.guard_not_started(event, now)
            or cls.guard_event_ready(event)
            or cls.guard_registration_open(event, now)
            or cls.guard_not_registered(event, participant)
            or cls.guard_not_fully_booked(event)
        )

    @classmethod
    def unregistration_guards(cls, event: "Event", now: datetime) -> Optional[RegistrationError]:
        return cls.guard_not_started(event, now)
