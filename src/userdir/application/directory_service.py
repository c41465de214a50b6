"""User creation, duplication, and business cards over a UserStore."""

import dataclasses
import logging
import threading
import time
from concurrent.futures import Executor, Future

from userdir.application.business_card import BusinessCardRenderer
from userdir.application.errors import CardRenderError, UserLookupError
from userdir.application.ports import CardRenderer, RetryPolicy, UserStore
from userdir.application.retry import CREATE_RETRY_DELAY, FixedDelay
from userdir.domain import User

logger = logging.getLogger(__name__)

DUPLICATE_SUFFIX = "_"


class DirectoryService:
    """Creates users in the background, duplicates them, and renders business cards.

    create_user never reports failure: it retries the store write forever with
    the retry policy's delay. duplicate_user and make_business_card run on the
    caller's thread and raise on any store or render failure.
    """

    def __init__(
        self,
        store: UserStore,
        *,
        retry_policy: RetryPolicy | None = None,
        executor: Executor | None = None,
        renderer: CardRenderer | None = None,
    ) -> None:
        self._store = store
        self._retry_policy = FixedDelay() if retry_policy is None else retry_policy
        self._executor = executor
        self._renderer = BusinessCardRenderer() if renderer is None else renderer

    def create_user(self, user: User) -> Future:
        """Schedule the user to be stored; returns immediately.

        Each call gets its own daemon thread (or a task on the injected
        executor), so a user that never stores does not hold up other calls or
        process exit. The returned future resolves to the number of attempts
        once the write succeeds. It never carries a store error and cannot
        cancel the loop.
        """
        if self._executor is not None:
            return self._executor.submit(self._add_until_stored, user)
        future: Future = Future()
        threading.Thread(
            target=self._run_create,
            args=(user, future),
            name=f"userdir-create-{user.id}",
            daemon=True,
        ).start()
        return future

    def _run_create(self, user: User, future: Future) -> None:
        future.set_running_or_notify_cancel()
        try:
            future.set_result(self._add_until_stored(user))
        except Exception as err:
            future.set_exception(err)

    def _add_until_stored(self, user: User) -> int:
        attempt = 0
        while True:
            attempt += 1
            try:
                self._store.add_user(user)
            except Exception as err:
                logger.warning(
                    "Add user %s failed (attempt %d), retrying: %s", user.id, attempt, err
                )
                self._wait(attempt)
                continue
            if attempt > 1:
                logger.info("Added user %s after %d attempts", user.id, attempt)
            return attempt

    def _wait(self, attempt: int) -> None:
        try:
            self._retry_policy.wait(attempt)
        except Exception:
            logger.exception(
                "Retry policy failed (attempt %d), waiting %ss", attempt, CREATE_RETRY_DELAY
            )
            time.sleep(CREATE_RETRY_DELAY)

    def duplicate_user(self, user_id: str) -> str:
        """Copy the user under id + "_" and return the new id.

        Store write errors propagate unchanged.
        """
        user = self._find(user_id)
        copy = dataclasses.replace(user, id=user.id + DUPLICATE_SUFFIX)
        self._store.add_user(copy)
        return copy.id

    def make_business_card(self, user_id: str) -> str:
        """Return the two-line card (name, phone) for the user."""
        user = self._find(user_id)
        try:
            return self._renderer.render(user.name, user.phone)
        except Exception as err:
            raise CardRenderError(f"execute template: {err}") from err

    def _find(self, user_id: str) -> User:
        try:
            return self._store.find_user(user_id)
        except Exception as err:
            raise UserLookupError(f"find user: {err}") from err
