"""Domain Policies - Rules shared by several use cases."""

from .transition_policy import TransitionPolicy, TransitionVerdict

__all__ = ["TransitionPolicy", "TransitionVerdict"]
