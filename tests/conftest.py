from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from tests.helpers import make_token


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 2, 2)


@pytest.fixture
def faculty_token() -> str:
    now = datetime.now(timezone.utc)
    return make_token(sub="7", full_name="Prof. Rao", role="faculty", exp=now + timedelta(hours=1))


@pytest.fixture
def admin_token() -> str:
    now = datetime.now(timezone.utc)
    return make_token(sub="1", full_name="Admin", role="admin", exp=now + timedelta(hours=1))
