from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from ..common.datetime_utils import now_local
from ..common.validators import require_key_segment
from ..core.exceptions import ValidationError
from .repository import MeetLinkRepository


class MeetLinkService:
    def __init__(self, links: MeetLinkRepository):
        self._links = links

    def save(self, payload: Mapping[str, Any], *, now: datetime | None = None) -> dict:
        course_id = payload.get("courseId")
        course_title = payload.get("courseTitle")
        meet_link = payload.get("meetLink")
        if not course_id or not course_title or not meet_link:
            raise ValidationError("Missing required fields. Please provide courseId, courseTitle, and meetLink")

        course_id = require_key_segment(course_id, "courseId")
        data = {"courseId": course_id, "courseTitle": course_title, "meetLink": meet_link}
        self._links.save(course_id, {**data, "updatedAt": (now or now_local()).isoformat()})
        return data

    def list_all(self) -> list[dict]:
        return list(self._links.list_all())
