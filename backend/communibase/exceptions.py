"""Exceptions raised by Communibase entities and their collaborators."""


class CommunibaseError(Exception):
    """Base class for all errors raised by this package."""


class InvalidIdError(CommunibaseError, ValueError):
    """A value is not a well-formed Communibase (ObjectId) identifier."""


class InvalidDateError(CommunibaseError, ValueError):
    """A stored date value could not be parsed."""


class InvalidDataBagPathError(CommunibaseError, ValueError):
    """A DataBag path does not point below an entity type."""


class RegistrationError(CommunibaseError):
    """Base class for rejected register/unregister actions."""


class ActionNotAllowedError(RegistrationError):
    """The event is not in a state that accepts registrations."""


class ActionNotAllowedByDateError(RegistrationError):
    """The event has started, or registration is closed by date."""


class AlreadyRegisteredError(RegistrationError):
    pass


class FullyBookedError(RegistrationError):
    pass


class InvalidValueError(CommunibaseError, ValueError):
    """A stored value does not have the type the entity expects."""
