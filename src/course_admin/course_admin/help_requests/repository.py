from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.constants import HELP_REQUESTS_COLLECTION
from ..database.store import DocumentStore


class HelpRequestRepository(Protocol):
    def add(self, data: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def get(self, request_id: str) -> Optional[dict]:
        raise NotImplementedError

    def list_newest_first(self) -> Sequence[tuple[str, dict]]:
        raise NotImplementedError

    def delete(self, request_id: str) -> None:
        raise NotImplementedError


class FirestoreHelpRequestRepository(HelpRequestRepository):
    def __init__(self, documents: DocumentStore):
        self._documents = documents

    def add(self, data: Mapping[str, Any]) -> str:
        return self._documents.add(HELP_REQUESTS_COLLECTION, data)

    def get(self, request_id: str) -> Optional[dict]:
        return self._documents.get(HELP_REQUESTS_COLLECTION, request_id)

    def list_newest_first(self) -> Sequence[tuple[str, dict]]:
        return self._documents.list(HELP_REQUESTS_COLLECTION, order_by="timestamp", descending=True)

    def delete(self, request_id: str) -> None:
        self._documents.delete(HELP_REQUESTS_COLLECTION, request_id)
