from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FanOutResult:
    """Outcome of a fan-out: values of the tasks that succeeded, errors of the rest."""

    values: dict[str, Any] = field(default_factory=dict)
    failures: dict[str, BaseException] = field(default_factory=dict)

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    @property
    def failed(self) -> tuple[str, ...]:
        return tuple(self.failures)


def gather_independent(tasks: Mapping[str, Callable[[], Any]], *, max_workers: int | None = None) -> FanOutResult:
    """Run named callables concurrently and wait for all of them.

    A failure in one task is recorded and never cancels or hides the others.
    """
    if not tasks:
        return FanOutResult()

    values: dict[str, Any] = {}
    failures: dict[str, BaseException] = {}
    with ThreadPoolExecutor(max_workers=max_workers or len(tasks)) as pool:
        futures = {name: pool.submit(fn) for name, fn in tasks.items()}
        for name, future in futures.items():
            try:
                values[name] = future.result()
            except Exception as e:
                logger.warning("Fan-out task %s failed: %s", name, e)
                failures[name] = e

    return FanOutResult(values=values, failures=failures)
