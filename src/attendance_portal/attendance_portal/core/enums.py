from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles issued by the backend in the session credential."""

    ADMIN = "admin"
    FACULTY = "faculty"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"


class SessionSlot(str, Enum):
    """Teaching session of the day that attendance is marked for."""

    MORNING = "morning"
    AFTERNOON = "afternoon"


class BackendStatus(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"
