from .event import Event
from .models import Participant, Participation

__all__ = ["Event", "Participant", "Participation"]
