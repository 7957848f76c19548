"""Domain Value Objects - Immutable objects without identity."""

from .actor import Actor
from .form_data import FormData

__all__ = ["Actor", "FormData"]
