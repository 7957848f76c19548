"""Domain Enums - Constant values used across the domain."""

from .application_status import ApplicationStatus
from .user_role import UserRole

__all__ = ["ApplicationStatus", "UserRole"]
