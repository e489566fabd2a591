from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping

from ..common.datetime_utils import now_local
from ..common.validators import require_image_within
from ..core.constants import DEFAULT_HELP_IMAGE_MB
from ..core.enums import HelpRequestStatus
from ..core.exceptions import NotFoundError
from .repository import HelpRequestRepository

logger = logging.getLogger(__name__)

_LISTED_FIELDS = ("applicationId", "name", "phoneNumber", "concern", "image", "status", "timestamp")


class HelpRequestService:
    def __init__(self, requests: HelpRequestRepository, *, max_image_mb: float = DEFAULT_HELP_IMAGE_MB):
        self._requests = requests
        self._max_image_mb = max_image_mb

    def create(self, payload: Mapping[str, Any], *, now: datetime | None = None) -> dict:
        image = payload.get("imageBase64")
        require_image_within(image, self._max_image_mb)

        data = {
            "applicationId": payload.get("applicationId"),
            "name": payload.get("name"),
            "phoneNumber": payload.get("phoneNumber"),
            "concern": payload.get("concern"),
            "image": image,
            "status": HelpRequestStatus.PENDING.value,
            "timestamp": (now or now_local()).isoformat(),
        }
        request_id = self._requests.add(data)
        logger.info("Created help request %s", request_id)
        return {"id": request_id, **data}

    def list_all(self) -> list[dict]:
        return [
            {"id": request_id, **{name: data.get(name) for name in _LISTED_FIELDS}}
            for request_id, data in self._requests.list_newest_first()
        ]

    def delete(self, request_id: str) -> None:
        if not self._requests.get(request_id):
            raise NotFoundError("Concern not found")
        self._requests.delete(request_id)
