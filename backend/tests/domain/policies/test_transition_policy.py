"""Unit tests for the status transition policy."""

import pytest
from domain.enums import ApplicationStatus, UserRole
from domain.exceptions import ForbiddenError, InvalidTransitionError, ValidationError
from domain.policies import TransitionPolicy, TransitionVerdict

DRAFT = ApplicationStatus.DRAFT
SUBMITTED = ApplicationStatus.SUBMITTED
REVIEW = ApplicationStatus.REVIEW
ACCEPTED = ApplicationStatus.ACCEPTED
REJECTED = ApplicationStatus.REJECTED

ALL_STATUSES = list(ApplicationStatus)
ADMIN_SETTABLE = [SUBMITTED, REVIEW, ACCEPTED, REJECTED]


class TestStudentTransitions:
    """Test the applicant side of the policy."""

    def test_draft_to_submitted_is_allowed(self):
        verdict = TransitionPolicy().evaluate(DRAFT, SUBMITTED, UserRole.STUDENT)
        assert verdict == TransitionVerdict.ALLOWED

    @pytest.mark.parametrize("current", [SUBMITTED, REVIEW, ACCEPTED, REJECTED])
    def test_resubmission_is_invalid(self, current):
        """Test that only a draft can be submitted."""
        verdict = TransitionPolicy().evaluate(current, SUBMITTED, UserRole.STUDENT)
        assert verdict == TransitionVerdict.INVALID

    @pytest.mark.parametrize("current", ALL_STATUSES)
    @pytest.mark.parametrize("requested", [DRAFT, REVIEW, ACCEPTED, REJECTED])
    def test_other_targets_are_forbidden(self, current, requested):
        """Test that students can never set review or decision statuses."""
        verdict = TransitionPolicy().evaluate(current, requested, UserRole.STUDENT)
        assert verdict == TransitionVerdict.FORBIDDEN

    def test_strict_mode_does_not_change_student_rules(self):
        policy = TransitionPolicy(strict=True)
        assert policy.evaluate(DRAFT, SUBMITTED, UserRole.STUDENT) == TransitionVerdict.ALLOWED
        assert policy.evaluate(DRAFT, ACCEPTED, UserRole.STUDENT) == TransitionVerdict.FORBIDDEN


class TestPermissiveAdminTransitions:
    """Test the default admin rules."""

    @pytest.mark.parametrize("current", ALL_STATUSES)
    @pytest.mark.parametrize("requested", ADMIN_SETTABLE)
    def test_any_admin_settable_status_is_allowed(self, current, requested):
        verdict = TransitionPolicy().evaluate(current, requested, UserRole.ADMIN)
        assert verdict == TransitionVerdict.ALLOWED

    @pytest.mark.parametrize("current", ALL_STATUSES)
    def test_back_to_draft_is_invalid(self, current):
        verdict = TransitionPolicy().evaluate(current, DRAFT, UserRole.ADMIN)
        assert verdict == TransitionVerdict.INVALID


class TestStrictAdminTransitions:
    """Test the opt-in adjacency graph."""

    @pytest.mark.parametrize(
        "current, requested",
        [
            (DRAFT, SUBMITTED),
            (SUBMITTED, REVIEW),
            (REVIEW, ACCEPTED),
            (REVIEW, REJECTED),
            (REVIEW, SUBMITTED),
        ],
    )
    def test_graph_edges_are_allowed(self, current, requested):
        verdict = TransitionPolicy(strict=True).evaluate(current, requested, UserRole.ADMIN)
        assert verdict == TransitionVerdict.ALLOWED

    @pytest.mark.parametrize(
        "current, requested",
        [
            (DRAFT, ACCEPTED),
            (SUBMITTED, ACCEPTED),
            (ACCEPTED, REJECTED),
            (REJECTED, REVIEW),
            (ACCEPTED, SUBMITTED),
        ],
    )
    def test_shortcuts_and_terminal_exits_are_invalid(self, current, requested):
        """Test that strict mode keeps accepted and rejected terminal."""
        verdict = TransitionPolicy(strict=True).evaluate(current, requested, UserRole.ADMIN)
        assert verdict == TransitionVerdict.INVALID


class TestEnforce:
    """Test that verdicts map to domain errors."""

    def test_allowed_does_not_raise(self):
        TransitionPolicy().enforce(DRAFT, SUBMITTED, UserRole.STUDENT)

    def test_forbidden_raises_forbidden_error(self):
        with pytest.raises(ForbiddenError):
            TransitionPolicy().enforce(DRAFT, ACCEPTED, UserRole.STUDENT)

    def test_invalid_raises_invalid_transition_error(self):
        with pytest.raises(InvalidTransitionError) as exc_info:
            TransitionPolicy().enforce(SUBMITTED, SUBMITTED, UserRole.STUDENT)
        assert exc_info.value.code == "INVALID_TRANSITION"
        assert exc_info.value.context == {"current": "submitted", "requested": "submitted"}


class TestStatusParsing:
    """Test the status vocabulary."""

    def test_parse_known_status(self):
        assert ApplicationStatus.parse("review") == REVIEW
        assert ApplicationStatus.parse(ACCEPTED) == ACCEPTED

    @pytest.mark.parametrize("value", ["banana", "Accepted", ""])
    def test_parse_unknown_status_raises_validation_error(self, value):
        with pytest.raises(ValidationError, match="Unknown status"):
            ApplicationStatus.parse(value)

    def test_terminal_statuses(self):
        assert {s for s in ApplicationStatus if s.is_terminal} == {ACCEPTED, REJECTED}
