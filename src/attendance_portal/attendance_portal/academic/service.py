from __future__ import annotations

import logging

from ..auth.model import SessionContext
from ..common.concurrency import gather_independent
from ..core.exceptions import SessionExpiredError
from .model import AcademicMetadata
from .repository import AcademicRepository

logger = logging.getLogger(__name__)


class AcademicService:
    def __init__(self, academic: AcademicRepository):
        self._academic = academic

    def load_metadata(self, ctx: SessionContext) -> AcademicMetadata:
        """Fetch the four reference lists together.

        Each list fails on its own: the result carries whatever loaded, and
        the names of the lists that did not. A rejected session still wins
        once every fetch has finished.
        """
        token = ctx.token
        result = gather_independent(
            {
                "years": lambda: self._academic.list_years(token=token),
                "branches": lambda: self._academic.list_branches(token=token),
                "sections": lambda: self._academic.list_sections(token=token),
                "courses": lambda: self._academic.list_courses(token=token),
            }
        )

        for err in result.failures.values():
            if isinstance(err, SessionExpiredError):
                raise err

        if result.failed:
            logger.warning("Academic metadata incomplete, failed: %s", ", ".join(result.failed))

        return AcademicMetadata(
            years=list(result.get("years", [])),
            branches=list(result.get("branches", [])),
            sections=list(result.get("sections", [])),
            courses=list(result.get("courses", [])),
            failed=result.failed,
        )

