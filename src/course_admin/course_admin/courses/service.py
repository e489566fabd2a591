from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping

from ..common.datetime_utils import now_local
from ..common.validators import require_image_within, require_non_empty, to_number
from ..core.constants import DEFAULT_COURSE_IMAGE_MB
from ..core.exceptions import NotFoundError
from .repository import CourseRepository

logger = logging.getLogger(__name__)

_COURSE_FIELDS = ("title", "categoryId", "startDate", "startTime", "endTime", "pdfLink", "details", "lastDateToApply")


class CourseService:
    def __init__(self, courses: CourseRepository, *, max_image_mb: float = DEFAULT_COURSE_IMAGE_MB):
        self._courses = courses
        self._max_image_mb = max_image_mb

    def _course_data(self, payload: Mapping[str, Any]) -> dict:
        require_non_empty(payload.get("title"), "title")
        data = {name: payload.get(name) for name in _COURSE_FIELDS}
        fees = payload.get("fees")
        data["fees"] = to_number(fees, "fees") if fees not in (None, "") else 0
        return data

    def create(self, payload: Mapping[str, Any], *, now: datetime | None = None) -> dict:
        image = payload.get("courseImage")
        require_image_within(image, self._max_image_mb)

        data = self._course_data(payload)
        data["imageBase64"] = image
        data["createdAt"] = (now or now_local()).isoformat()

        course_id = self._courses.add(data)
        logger.info("Created course %s", course_id)
        return {"id": course_id, **data}

    def list_all(self) -> list[dict]:
        return list(self._courses.list_all())

    def get(self, course_id: str) -> dict:
        course = self._courses.get(course_id)
        if not course:
            raise NotFoundError("Course not found")

        course = dict(course)
        image = course.pop("imageBase64", None)
        if image:
            course["imageUrl"] = image if image.startswith("data:") else f"data:image/jpeg;base64,{image}"
        return {"id": course_id, **course}

    def update(self, course_id: str, payload: Mapping[str, Any], *, now: datetime | None = None) -> dict:
        image = payload.get("courseImage")
        require_image_within(image, self._max_image_mb)

        data = self._course_data(payload)
        data["updatedAt"] = (now or now_local()).isoformat()
        # Keep the stored image unless a new one is supplied.
        if image:
            data["imageBase64"] = image

        self._courses.update(course_id, data)
        return {"id": course_id, **data}

    def delete(self, course_id: str) -> None:
        self._courses.delete(course_id)
