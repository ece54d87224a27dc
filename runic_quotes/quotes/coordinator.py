"""
SeedingCoordinator — at most one seed pass in flight per repository.

Usage::

    coordinator = SeedingCoordinator(repository)

    # From any number of threads:
    coordinator.seed_if_needed()

The first caller runs QuoteRepository.seed_if_needed(); callers arriving
while it runs wait for that same attempt and receive its result, or the
same exception.  The in-flight marker is cleared as soon as the attempt
ends, so a later call (e.g. after a transient corpus failure) starts a
fresh pass.  Outcomes are never remembered beyond that.

Cross-process duplicates are prevented one level down, by the store's
``save(if_empty=True)``.
"""

import logging
import threading
from concurrent.futures import Future
from typing import Optional

from .repository import QuoteRepository

__all__ = ["SeedingCoordinator"]

logger = logging.getLogger(__name__)


class SeedingCoordinator:
    """Single-flight wrapper around QuoteRepository.seed_if_needed()."""

    def __init__(self, repository: QuoteRepository) -> None:
        self._repository = repository
        self._lock = threading.Lock()
        self._in_flight: Optional[Future] = None

    @property
    def is_seeding(self) -> bool:
        with self._lock:
            return self._in_flight is not None

    def seed_if_needed(self, timeout: Optional[float] = None) -> int:
        """
        Seed the repository's store unless another caller is already doing so.

        Args:
            timeout: Seconds a waiting caller blocks for the in-flight pass
                     (None = no limit).  Ignored by the caller running the pass.

        Returns:
            Number of quotes inserted by the shared pass.

        Raises:
            Whatever the shared pass raised (SeedDataUnavailable,
            PersistenceError, ...); concurrent.futures.TimeoutError when
            *timeout* expires while waiting.
        """
        with self._lock:
            future = self._in_flight
            owner = future is None
            if owner:
                future = Future()
                future.set_running_or_notify_cancel()
                self._in_flight = future

        if not owner:
            logger.debug("Seeding already in progress, waiting for completion")
            return future.result(timeout=timeout)

        try:
            inserted = self._repository.seed_if_needed()
        except Exception as exc:
            logger.error("Database seeding failed: %s", exc)
            self._finish(future, exception=exc)
            raise
        except BaseException as exc:
            # KeyboardInterrupt / SystemExit still resolve the shared future.
            logger.warning("Database seeding interrupted: %r", exc)
            self._finish(future, exception=exc)
            raise
        logger.info("Database seeding completed successfully")
        self._finish(future, result=inserted)
        return inserted

    def _finish(
        self,
        future: Future,
        result: int = 0,
        exception: Optional[BaseException] = None,
    ) -> None:
        # Clear the marker before publishing, so nobody new joins a finished pass.
        with self._lock:
            self._in_flight = None
        if exception is not None:
            future.set_exception(exception)
        else:
            future.set_result(result)
