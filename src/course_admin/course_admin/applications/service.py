from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping

from ..common.datetime_utils import now_local, to_millis
from ..common.validators import require_fields, require_key_segment, require_pattern
from ..core.enums import ApplicationStatus
from ..core.exceptions import NotFoundError, ValidationError
from .repository import ApplicationRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("applicationId", "name", "phone", "address", "city", "state", "pincode", "dob")


class ApplicationService:
    def __init__(self, applications: ApplicationRepository):
        self._applications = applications

    def submit(self, payload: Mapping[str, Any], *, now: datetime | None = None) -> str:
        require_fields(payload, REQUIRED_FIELDS)
        require_pattern(payload.get("phone"), r"\d{10}", "Invalid phone number format")
        require_pattern(payload.get("pincode"), r"\d{6}", "Invalid pincode format")
        application_id = require_key_segment(payload.get("applicationId"), "applicationId")

        data = {**payload, "applicationId": application_id, "createdAt": to_millis(now or now_local())}
        self._applications.save(application_id, data)
        logger.info("Stored application %s", application_id)
        return application_id

    def list_all(self) -> dict[str, dict]:
        return self._applications.list_all()

    def get(self, application_id: str) -> dict:
        application = self._applications.get(require_key_segment(application_id, "applicationId"))
        if not application:
            raise NotFoundError("Application not found")
        return application

    def set_status(self, application_id: str, status) -> None:
        try:
            decision = ApplicationStatus(status)
        except ValueError:
            raise ValidationError("Invalid status value. Must be SELECTED, REJECTED, or PENDING.") from None

        self.get(application_id)
        self._applications.set_status(application_id, decision.value)
        logger.info("Application %s marked %s", application_id, decision.value)
