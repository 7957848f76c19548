"""Actor value object representing the caller of an operation."""

from dataclasses import dataclass

from domain.enums import UserRole


@dataclass(frozen=True)
class Actor:
    """
    Immutable identity of the user performing an operation.

    Supplied by the identity provider on every call and trusted as given.

    Attributes:
        user_id: Identifier of the user
        role: Role of the user (student or admin)
    """

    user_id: int
    role: UserRole = UserRole.STUDENT

    def __post_init__(self) -> None:
        """Validate actor identity."""
        if isinstance(self.user_id, bool) or not isinstance(self.user_id, int):
            raise ValueError("Actor user_id must be an integer")
        if self.user_id <= 0:
            raise ValueError("Actor user_id must be positive")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def owns(self, owner_id: int) -> bool:
        """Check if the actor is the given owner."""
        return self.user_id == owner_id

    def can_access(self, owner_id: int) -> bool:
        """Admins see everything, everybody else only their own records."""
        return self.is_admin or self.owns(owner_id)

    def __str__(self) -> str:
        return f"{self.role.value}#{self.user_id}"
