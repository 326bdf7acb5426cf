from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..api.client import ApiClient
from ..auth.model import SessionContext
from ..core.enums import SessionSlot

logger = logging.getLogger(__name__)


class SmsService:
    """Asks the backend to text a student's guardian; delivery is the backend's job."""

    def __init__(self, client: ApiClient):
        self._client = client

    def send(self, ctx: SessionContext, *, student_id: int, work_date: date, slot: SessionSlot) -> Optional[dict]:
        payload = {"student_id": int(student_id), "date": work_date.isoformat(), "session": slot.value}
        data = self._client.post("/sms/send", payload, token=ctx.token)
        logger.info("Guardian SMS requested for student %s (%s %s)", student_id, payload["date"], slot.value)
        return data if isinstance(data, dict) else None
