"""User service - keeps the in-memory user list in step with the remote collection.

Every change is attempted once against the remote collection and then applied
locally no matter what happened remotely: the server's representation is used
when the call succeeds, the locally built record when it fails. Remote errors
are logged and never reach the caller.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from usermgr_cli.api.client import get_client
from usermgr_cli.api.users import UsersAPI
from usermgr_cli.constants import SEED_USERS
from usermgr_cli.models.user import User, UserDraft, UserForm, ValidationResult, validate_draft
from usermgr_cli.services.form_state import FormState
from usermgr_cli.utils.id_utils import generate_id

logger = logging.getLogger(__name__)

# HTTP and transport failures, URLs the transport cannot use (bad host or
# out-of-range port), and bodies that are not JSON or not the expected shape
REMOTE_ERRORS = (httpx.HTTPError, httpx.InvalidURL, OSError, OverflowError, ValueError)

_records_adapter = TypeAdapter(list[dict[str, Any]])


@dataclass(frozen=True)
class RemoteConfirmed:
    """The server accepted the change and returned its copy of the user."""

    user: User


@dataclass(frozen=True)
class LocalFallback:
    """The remote call failed; the locally built user stands in."""

    user: User
    error: Exception


SyncOutcome = RemoteConfirmed | LocalFallback


def default_users() -> list[User]:
    """Fresh copies of the built-in seed users."""
    return [User.model_validate(data) for data in SEED_USERS]


def _payload(user: User) -> dict[str, Any]:
    return user.model_dump(exclude_none=True)


def parse_users(data: Any) -> list[User]:
    """Parse a list-all response body.

    A body that is not a list of objects raises ``ValidationError``. Records
    inside the list that do not parse as users are logged and skipped.
    """
    users = []
    for index, item in enumerate(_records_adapter.validate_python(data)):
        try:
            users.append(User.model_validate(item))
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed user record at position %d: %s",
                index,
                exc.errors(include_url=False),
            )
    return users


class UserService:
    """Service owning the authoritative in-memory user list.

    The presentation layer reads ``users`` and ``form`` and changes state only
    through the methods below.
    """

    def __init__(self, users_api: UsersAPI, form: FormState | None = None):
        """Initialize the user service.

        Args:
            users_api: Client for the remote user collection
            form: Form state to drive; a fresh one is created when omitted
        """
        self.api = users_api
        self.form = form if form is not None else FormState()
        self._users: list[User] = []
        self._tokens = itertools.count(1)
        self._pending_updates: dict[int, int] = {}

    @property
    def users(self) -> list[User]:
        """Snapshot of the current user list, in insertion order."""
        return list(self._users)

    def get_user(self, user_id: int) -> User | None:
        return next((u for u in self._users if u.id == user_id), None)

    async def close(self) -> None:
        await self.api.client.close()

    # ------------------------------------------------------------------
    # Remote attempts
    # ------------------------------------------------------------------

    @staticmethod
    async def _attempt(call: Awaitable[dict[str, Any]], local: User) -> SyncOutcome:
        """Await one remote write and wrap its result as an outcome."""
        try:
            data = await call
            return RemoteConfirmed(User.model_validate(data))
        except REMOTE_ERRORS as exc:
            return LocalFallback(local, exc)

    @staticmethod
    def _converge(outcome: SyncOutcome, action: str) -> User:
        """Pick the user to keep locally for *outcome*."""
        match outcome:
            case RemoteConfirmed(user=user):
                return user
            case LocalFallback(user=user, error=error):
                logger.warning(
                    "Could not %s user %s in the API, keeping it in memory only: %s",
                    action,
                    user.id,
                    error,
                )
                return user
        raise TypeError(f"Unexpected outcome: {outcome!r}")

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def load(self) -> list[User]:
        """Populate the list from the remote collection.

        A non-empty collection is adopted as-is, minus any records that do
        not parse. An empty one is seeded with the default users (each write
        attempted once, failures ignored) and the defaults are adopted. If the
        collection cannot be read at all the defaults are adopted without
        writing anything.
        """
        try:
            data = await self.api.list_users()
            remote = parse_users(data)
        except REMOTE_ERRORS as exc:
            logger.warning("Could not reach the user API, using default users: %s", exc)
            self._users = default_users()
            return self.users

        if data:
            self._users = remote
            logger.info("Loaded %d users", len(remote))
            return self.users

        seeds = default_users()
        for seed in seeds:
            try:
                await self.api.create_user(_payload(seed))
            except REMOTE_ERRORS as exc:
                logger.error("Error inserting default user %s: %s", seed.id, exc)
        self._users = seeds
        logger.info("User collection was empty, seeded %d default users", len(seeds))
        return self.users

    async def create(self, values: UserForm) -> User:
        """Create a user from validated form values.

        The id is derived from the current list before the remote call.
        Clears the draft and the edit marker.
        """
        local = User(id=generate_id(self._users), **values.model_dump())
        outcome = await self._attempt(self.api.create_user(_payload(local)), local)
        created = self._converge(outcome, "save")
        self._users.append(created)
        self.form.reset_draft()
        self.form.clear_edit_marker()
        return created

    async def update(self, user_id: int, values: UserForm | None) -> User | None:
        """Replace the user *user_id* with *values*.

        Does nothing when *values* is None. If another update of the same user
        starts while this one is waiting on the server, this one's result is
        dropped and the newer update decides the final state.
        """
        if values is None:
            return None

        local = User(id=user_id, **values.model_dump())
        token = next(self._tokens)
        self._pending_updates[user_id] = token

        try:
            outcome = await self._attempt(
                self.api.update_user(user_id, _payload(local)), local
            )
        finally:
            latest = self._pending_updates.get(user_id) == token
            if latest:
                del self._pending_updates[user_id]

        if not latest:
            logger.info("Discarding stale update response for user %s", user_id)
            return None

        updated = self._converge(outcome, "update")
        self._users = [updated if u.id == user_id else u for u in self._users]
        self.form.clear_edit_marker()
        return updated

    async def delete(self, user_id: int) -> bool:
        """Delete user *user_id*; it is removed locally even if the API fails.

        Returns:
            True if a user was removed from the local list
        """
        try:
            await self.api.delete_user(user_id)
        except REMOTE_ERRORS as exc:
            logger.warning(
                "Could not delete user %s in the API, removing it in memory only: %s",
                user_id,
                exc,
            )
        before = len(self._users)
        self._users = [u for u in self._users if u.id != user_id]
        return len(self._users) < before

    def begin_edit(self, user: User) -> None:
        self.form.begin_edit(user)

    def cancel_edit(self) -> None:
        self.form.cancel()

    async def submit(self, draft: UserDraft | None = None) -> ValidationResult:
        """Validate the draft and create or update accordingly.

        Args:
            draft: Replaces the form's draft before validating, if given

        Returns:
            The validation result; when invalid nothing else changes
        """
        if draft is not None:
            self.form.draft = draft

        result = validate_draft(self.form.draft)
        if not result.valid:
            return result

        if self.form.editing_id is not None:
            await self.update(self.form.editing_id, result.values)
        else:
            await self.create(result.values)
        self.form.reset_draft()
        return result


def get_user_service(base_url: str | None = None) -> UserService:
    """Factory function to create a UserService bound to the configured API."""
    return UserService(UsersAPI(get_client(base_url)))
