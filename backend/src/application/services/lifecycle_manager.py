"""Application lifecycle manager - status workflow and audit trail."""

from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from application.interfaces import INotificationService, IUnitOfWork
from application.use_cases.access import load_accessible_application, load_application
from domain.clock import utc_now
from domain.entities import Application, HistoryEntry
from domain.enums import ApplicationStatus, UserRole
from domain.exceptions import ForbiddenError, ValidationError
from domain.policies import TransitionPolicy
from domain.value_objects import Actor, FormData
from infrastructure.config import get_logger


CREATED_NOTE = "Application created"


class ApplicationLifecycleManager:
    """
    Owns the status of an application and its append-only history.

    Every status change is written together with exactly one history entry
    inside a single unit of work, so a reader never sees one without the
    other. Storage errors are not caught here; they roll the unit of work
    back and propagate to the caller.
    """

    def __init__(
        self,
        unit_of_work: IUnitOfWork,
        policy: Optional[TransitionPolicy] = None,
        notification_service: Optional[INotificationService] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize the lifecycle manager.

        Args:
            unit_of_work: Transactional access to the repositories
            policy: Transition policy, permissive by default
            notification_service: Optional best-effort notifier
            clock: Source of naive UTC timestamps
        """
        self.uow = unit_of_work
        self.policy = policy or TransitionPolicy()
        self.notifier = notification_service
        self.clock = clock
        self.logger = get_logger(self.__class__.__name__)

    async def create(
        self,
        actor: Actor,
        form_data: Optional[Mapping[str, Any]] = None,
    ) -> Application:
        """
        Create a draft application owned by the actor.

        Args:
            actor: Owner of the new application
            form_data: Initial form payload, may be empty

        Returns:
            The stored application

        Raises:
            ValidationError: If the payload is not a well-formed document
        """
        payload = FormData(form_data)
        now = self.clock()

        async with self.uow:
            application = await self.uow.applications.create(
                Application(
                    owner_id=actor.user_id,
                    status=ApplicationStatus.DRAFT,
                    form_data=payload,
                    created_at=now,
                    updated_at=now,
                )
            )
            await self.uow.history.append(
                HistoryEntry(
                    application_id=application.id,
                    actor_id=actor.user_id,
                    status=ApplicationStatus.DRAFT,
                    notes=CREATED_NOTE,
                    created_at=now,
                )
            )

        self.logger.info(f"✅ Application {application.id} created by {actor}")
        return application

    async def request_submission(
        self,
        application_id: int,
        actor: Actor,
        notes: Optional[str] = None,
    ) -> Application:
        """
        Submit a draft on behalf of its owner.

        Raises:
            NotFoundError: If the application does not exist
            ForbiddenError: If the actor does not own the application
            InvalidTransitionError: If the application is not a draft
        """
        return await self._owner_transition(
            application_id, actor, ApplicationStatus.SUBMITTED, notes
        )

    async def change_status(
        self,
        application_id: int,
        actor: Actor,
        new_status: "str | ApplicationStatus",
        notes: Optional[str] = None,
    ) -> Application:
        """
        Apply a status change requested through the status endpoint.

        Admins go through set_status. Everybody else goes through the owner
        path, where the transition policy only lets a draft be submitted.
        """
        if actor.is_admin:
            return await self.set_status(application_id, actor, new_status, notes)
        return await self._owner_transition(application_id, actor, new_status, notes)

    async def set_status(
        self,
        application_id: int,
        actor: Actor,
        new_status: "str | ApplicationStatus",
        notes: Optional[str] = None,
    ) -> Application:
        """
        Move an application to a new status as an administrator.

        Args:
            application_id: Application to update
            actor: Reviewer performing the change
            new_status: One of submitted, review, accepted, rejected
            notes: Optional reviewer comment stored on the history entry

        Returns:
            The updated application

        Raises:
            NotFoundError: If the application does not exist
            ForbiddenError: If the actor is not an admin
            ValidationError: If the status is not part of the vocabulary
            InvalidTransitionError: If the policy rejects the change
        """
        async with self.uow:
            application = await load_application(self.uow, application_id, for_update=True)
            if not actor.is_admin:
                error = ForbiddenError(
                    "Only administrators can set application status",
                    context={"application_id": application_id, "actor": str(actor)},
                )
                self.logger.warning(
                    f"⚠️ {actor} tried to set status of application {application_id}",
                    extra={"context": error.context},
                )
                raise error
            status = ApplicationStatus.parse(new_status)
            self.policy.enforce(application.status, status, actor.role)
            application, entry = await self._transition(
                application, status, actor, self._clean_notes(notes)
            )

        await self._notify(application, entry)
        return application

    async def add_note(self, application_id: int, actor: Actor, notes: str) -> HistoryEntry:
        """
        Append a reviewer note without changing the status.

        Identical notes are stored as separate entries.

        Raises:
            NotFoundError: If the application does not exist
            ForbiddenError: If the actor is not an admin
            ValidationError: If the notes are empty
        """
        async with self.uow:
            application = await load_application(self.uow, application_id, for_update=True)
            if not actor.is_admin:
                raise ForbiddenError(
                    "Only administrators can add notes",
                    context={"application_id": application_id, "actor": str(actor)},
                )
            text = self._clean_notes(notes)
            if text is None:
                raise ValidationError("Notes cannot be empty")

            entry = await self.uow.history.append(
                HistoryEntry(
                    application_id=application.id,
                    actor_id=actor.user_id,
                    status=None,
                    notes=text,
                    created_at=await self._next_timestamp(application.id),
                )
            )

        self.logger.info(f"📝 Note added to application {application_id} by {actor}")
        return entry

    async def get_history(
        self,
        application_id: int,
        actor: Actor,
        newest_first: bool = False,
    ) -> list[HistoryEntry]:
        """
        Get the audit trail of an application.

        Args:
            application_id: Application id
            actor: Owner or admin asking for the history
            newest_first: Return the most recent entry first

        Returns:
            Entries ordered by created_at, oldest first unless newest_first

        Raises:
            NotFoundError: If the application does not exist
            ForbiddenError: If the actor is neither owner nor admin
        """
        async with self.uow:
            await load_accessible_application(self.uow, application_id, actor)
            entries = await self.uow.history.list_for_application(application_id)

        if newest_first:
            entries.reverse()
        return entries

    async def _owner_transition(
        self,
        application_id: int,
        actor: Actor,
        new_status: "str | ApplicationStatus",
        notes: Optional[str],
    ) -> Application:
        async with self.uow:
            application = await load_application(self.uow, application_id, for_update=True)
            if not actor.owns(application.owner_id):
                error = ForbiddenError(
                    "Only the owner can submit an application",
                    context={"application_id": application_id, "actor": str(actor)},
                )
                self.logger.warning(
                    f"⚠️ {actor} tried to change application {application_id} they do not own",
                    extra={"context": error.context},
                )
                raise error
            status = ApplicationStatus.parse(new_status)
            # The owner path is evaluated with applicant rights, whatever the role.
            self.policy.enforce(application.status, status, UserRole.STUDENT)
            application, entry = await self._transition(
                application, status, actor, self._clean_notes(notes)
            )

        await self._notify(application, entry)
        return application

    async def _transition(
        self,
        application: Application,
        status: ApplicationStatus,
        actor: Actor,
        notes: Optional[str] = None,
    ) -> tuple[Application, HistoryEntry]:
        """Write the status change and its history entry in the open unit of work."""
        previous = application.status
        at = await self._next_timestamp(application.id)

        application.change_status(status, at=at)
        application = await self.uow.applications.update(application)
        entry = await self.uow.history.append(
            HistoryEntry(
                application_id=application.id,
                actor_id=actor.user_id,
                status=status,
                notes=notes,
                created_at=at,
            )
        )

        self.logger.info(
            f"🔄 Application {application.id}: {previous.value} -> {status.value} by {actor}",
            extra={
                "context": {
                    "application_id": application.id,
                    "actor": str(actor),
                    "current": previous.value,
                    "requested": status.value,
                }
            },
        )
        return application, entry

    async def _next_timestamp(self, application_id: int) -> datetime:
        """Timestamp strictly after the latest entry of the application."""
        now = self.clock()
        latest = await self.uow.history.get_latest(application_id)
        if latest is not None and now <= latest.created_at:
            return latest.created_at + timedelta(microseconds=1)
        return now

    async def _notify(self, application: Application, entry: HistoryEntry) -> None:
        """Tell the notifier about a committed change. Never raises."""
        if self.notifier is None:
            return
        try:
            delivered = await self.notifier.status_changed(application, entry)
        except Exception:
            self.logger.error(
                f"❌ Status notification for application {application.id} failed",
                exc_info=True,
                extra={"context": {"application_id": application.id}},
            )
            return
        if not delivered:
            self.logger.warning(
                f"⚠️ Status notification for application {application.id} was not delivered"
            )

    @staticmethod
    def _clean_notes(notes: Optional[str]) -> Optional[str]:
        if notes is None:
            return None
        text = notes.strip()
        return text or None
