from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping

from ..common.datetime_utils import now_local, to_millis
from ..common.validators import require_key_segment, to_number
from ..core.exceptions import NotFoundError
from .repository import PaymentRepository

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(self, payments: PaymentRepository):
        self._payments = payments

    def save(self, payload: Mapping[str, Any], *, now: datetime | None = None) -> dict:
        course = require_key_segment(payload.get("courseName"), "courseName")
        application_id = require_key_segment(payload.get("applicationId"), "applicationId")
        stamp = to_millis(now or now_local())

        data = {
            "name": payload.get("name"),
            "phone": payload.get("phone"),
            "email": payload.get("email"),
            "feeAmount": to_number(payload.get("feeAmount"), "feeAmount"),
            "updatedAt": stamp,
            "createdAt": stamp,
        }
        self._payments.save(course, application_id, data)
        logger.info("Saved payment for %s in %s", application_id, course)
        return data

    def update_fee(self, course: str, application_id: str, fee_amount, *, now: datetime | None = None) -> None:
        course = require_key_segment(course, "courseId")
        application_id = require_key_segment(application_id, "applicationId")
        self._payments.update(
            course,
            application_id,
            {"feeAmount": to_number(fee_amount, "feeAmount"), "updatedAt": to_millis(now or now_local())},
        )

    def get(self, course: str, application_id: str) -> dict:
        payment = self._payments.get(
            require_key_segment(course, "courseId"),
            require_key_segment(application_id, "applicationId"),
        )
        if not payment:
            raise NotFoundError("Payment data not found")
        return payment
