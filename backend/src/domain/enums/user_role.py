"""Roles supplied by the identity provider."""

from enum import Enum


class UserRole(str, Enum):
    """Role of the user performing an operation."""

    STUDENT = "student"
    ADMIN = "admin"

    def __str__(self) -> str:
        return self.value
