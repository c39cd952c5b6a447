"""Communibase entities: typed behaviour on top of generic Communibase records."""
import logging
from typing import Optional, Union

from communibase.config import Config
from communibase.data_bag import DataBag
from communibase.events import Event, Participant, Participation
from communibase.exceptions import (
    ActionNotAllowedByDateError,
    ActionNotAllowedError,
    AlreadyRegisteredError,
    CommunibaseError,
    FullyBookedError,
    InvalidDataBagPathError,
    InvalidDateError,
    InvalidIdError,
    InvalidValueError,
    RegistrationError,
)
from communibase.ids import CommunibaseId, CommunibaseIdCollection

logging.getLogger(__name__).addHandler(logging.NullHandler())


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """Send this package's log records to stderr at ``level`` (default Config.LOG_LEVEL)."""
    logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger(__name__).setLevel(level or Config.LOG_LEVEL)


__all__ = [
    "ActionNotAllowedByDateError",
    "ActionNotAllowedError",
    "AlreadyRegisteredError",
    "CommunibaseError",
    "CommunibaseId",
    "CommunibaseIdCollection",
    "Config",
    "DataBag",
    "Event",
    "FullyBookedError",
    "InvalidDataBagPathError",
    "InvalidDateError",
    "InvalidIdError",
    "InvalidValueError",
    "Participant",
    "Participation",
    "RegistrationError",
    "configure_logging",
]
