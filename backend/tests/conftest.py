"""Pytest configuration and fixtures."""
from datetime import datetime, timedelta, timezone

import pytest

from communibase import CommunibaseId, Event
from communibase.utils.enums import EventStatus

VALID_PERSON_ID = "5fa12ded66bd790136bbcd39"
VALID_PERSON_ID_2 = "5644681df29478ca0051340f"
VALID_PERSON_ID_3 = "5f8ece0575788000e3d2a4d2"

# Events in tests live under a custom namespace to prove it is honoured
TEST_ENTITY_TYPE = "myEvent"


class Person:
    """Minimal participant: anything with get_id() can register."""

    def __init__(self, person_id: str):
        self._id = CommunibaseId.from_valid_string(person_id)

    def get_id(self) -> CommunibaseId:
        return self._id


def iso_days_from_now(days: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


def make_event(event_data=None, **kwargs) -> Event:
    return Event.factory(event_data or {}, entity_type=TEST_ENTITY_TYPE, **kwargs)


def create_event(
    status=EventStatus.READY.value,
    max_participants=None,
    start_date=None,
    registration_start_date=None,
    registration_end_date=None,
) -> Event:
    return make_event({
        "status": status,
        "maxParticipants": max_participants,
        "startDate": start_date,
        "registrationStartDate": registration_start_date,
        "registrationEndDate": registration_end_date,
        "participants": [],
    })


def raw_participants(event: Event):
    return event.data_bag.get(f"{TEST_ENTITY_TYPE}.participants", [])


@pytest.fixture
def person_one():
    return Person(VALID_PERSON_ID)


@pytest.fixture
def person_two():
    return Person(VALID_PERSON_ID_2)


@pytest.fixture
def person_three():
    return Person(VALID_PERSON_ID_3)
