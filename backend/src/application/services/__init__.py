"""Application services - Stateful coordinators of domain rules."""

from .lifecycle_manager import ApplicationLifecycleManager

__all__ = ["ApplicationLifecycleManager"]
