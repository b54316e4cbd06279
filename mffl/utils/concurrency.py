"""Run independent upstream fetches in parallel and join them."""

from __future__ import annotations

import logging
import os
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import Any, Callable, Dict, Mapping, Optional

from mffl.errors import UpstreamError

logger = logging.getLogger(__name__)

FETCH_WORKERS = int(os.environ.get("MFFL_FETCH_WORKERS", 16))


class FetchGroup:
    """Thread pool used to issue a request's upstream calls concurrently.

    ``run`` waits for every task, or for the first failure. On failure the
    siblings that have not started are cancelled and the original exception
    is re-raised, so callers never see a partially populated result.
    """

    def __init__(
        self,
        max_workers: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers or FETCH_WORKERS,
            thread_name_prefix="mffl-fetch",
        )
        self._timeout = timeout

    def run(self, tasks: Mapping[str, Callable[[], Any]]) -> Dict[str, Any]:
        """Execute ``tasks`` concurrently.

        Args:
            tasks: Mapping of result name to zero-argument callable

        Returns:
            Mapping of result name to the callable's return value

        Raises:
            The first exception raised by any task, or ``UpstreamError`` when
            the group timeout elapses first.
        """
        futures: Dict[str, Future] = {
            name: self._executor.submit(task) for name, task in tasks.items()
        }
        done, pending = wait(
            futures.values(), timeout=self._timeout, return_when=FIRST_EXCEPTION
        )

        failed = next(
            (f for f in futures.values() if f in done and f.exception() is not None),
            None,
        )
        if failed is not None or pending:
            for future in pending:
                future.cancel()
            if failed is not None:
                raise failed.exception()
            names = [name for name, f in futures.items() if f in pending]
            logger.warning("Upstream fetch group timed out waiting for %s", names)
            raise UpstreamError(
                ",".join(names), reason=f"timed out after {self._timeout}s"
            )

        return {name: future.result() for name, future in futures.items()}

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
