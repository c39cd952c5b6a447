from enum import Enum

class EventStatus(str, Enum):
    READY = "Ready"
    UNDER_CONSTRUCTION = "Under construction"
    CANCELLED = "Cancelled"

class ParticipantStatus(str, Enum):
    REGISTERED = "registered"
    CANCELLED = "cancelled"

# Participant statuses that count as "taking a seat"
REGISTERED_STATUSES = frozenset({ParticipantStatus.REGISTERED.value})
