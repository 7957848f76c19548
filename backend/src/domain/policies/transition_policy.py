"""Status transition policy for the application lifecycle."""

from dataclasses import dataclass
from enum import Enum

from domain.enums import ApplicationStatus, UserRole
from domain.exceptions import ForbiddenError, InvalidTransitionError


class TransitionVerdict(str, Enum):
    """Outcome of evaluating a requested status change."""

    ALLOWED = "allowed"
    FORBIDDEN = "forbidden"
    INVALID = "invalid"


# Applicants may only hand in their own draft.
OWNER_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.DRAFT: frozenset({ApplicationStatus.SUBMITTED}),
}

ADMIN_TARGETS: frozenset[ApplicationStatus] = frozenset({
    ApplicationStatus.SUBMITTED,
    ApplicationStatus.REVIEW,
    ApplicationStatus.ACCEPTED,
    ApplicationStatus.REJECTED,
})

# Adjacency graph used in strict mode; accepted and rejected are terminal.
STRICT_ADMIN_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.DRAFT: frozenset({ApplicationStatus.SUBMITTED}),
    ApplicationStatus.SUBMITTED: frozenset({ApplicationStatus.REVIEW}),
    ApplicationStatus.REVIEW: frozenset({
        ApplicationStatus.ACCEPTED,
        ApplicationStatus.REJECTED,
        ApplicationStatus.SUBMITTED,
    }),
    ApplicationStatus.ACCEPTED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}


@dataclass(frozen=True)
class TransitionPolicy:
    """
    Single place deciding whether a role may move an application between
    two statuses.

    By default administrators may set any of submitted, review, accepted
    or rejected from any current status. With ``strict=True`` they must
    follow ``STRICT_ADMIN_TRANSITIONS``.

    Ownership is not part of the policy; callers check it before asking.
    """

    strict: bool = False

    def evaluate(
        self,
        current: ApplicationStatus,
        requested: ApplicationStatus,
        role: UserRole,
    ) -> TransitionVerdict:
        """
        Evaluate a requested transition.

        Args:
            current: Status the application is in
            requested: Status the actor asks for
            role: Role of the actor

        Returns:
            The verdict for this (current, requested, role) triple
        """
        if role == UserRole.ADMIN:
            return self._evaluate_admin(current, requested)

        if requested != ApplicationStatus.SUBMITTED:
            return TransitionVerdict.FORBIDDEN
        if requested not in OWNER_TRANSITIONS.get(current, frozenset()):
            return TransitionVerdict.INVALID
        return TransitionVerdict.ALLOWED

    def enforce(
        self,
        current: ApplicationStatus,
        requested: ApplicationStatus,
        role: UserRole,
    ) -> None:
        """
        Raise if the transition is not allowed.

        Raises:
            ForbiddenError: The role may never request this status
            InvalidTransitionError: The status change is not allowed from
                the current status
        """
        verdict = self.evaluate(current, requested, role)
        if verdict == TransitionVerdict.FORBIDDEN:
            raise ForbiddenError(
                f"Role '{role.value}' cannot set status '{requested.value}'",
                context={"current": current.value, "requested": requested.value},
            )
        if verdict == TransitionVerdict.INVALID:
            raise InvalidTransitionError(
                f"Cannot move application from '{current.value}' to '{requested.value}'",
                context={"current": current.value, "requested": requested.value},
            )

    def _evaluate_admin(
        self,
        current: ApplicationStatus,
        requested: ApplicationStatus,
    ) -> TransitionVerdict:
        if requested not in ADMIN_TARGETS:
            return TransitionVerdict.INVALID
        if self.strict and requested not in STRICT_ADMIN_TRANSITIONS.get(current, frozenset()):
            return TransitionVerdict.INVALID
        return TransitionVerdict.ALLOWED
