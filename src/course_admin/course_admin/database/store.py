from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence


class RealtimeStore(Protocol):
    """Key-path tree store (realtime database)."""

    def get(self, path: str) -> Any:
        raise NotImplementedError

    def keys(self, path: str) -> list[str]:
        """Child keys at ``path`` without fetching their values."""

        raise NotImplementedError

    def set(self, path: str, value: Any) -> None:
        raise NotImplementedError

    def update(self, path: str, values: Mapping[str, Any]) -> None:
        """Shallow merge at ``path``.

        Keys may be relative multi-segment paths (``a/b/c``); all of them are
        written in one atomic operation.
        """

        raise NotImplementedError

    def delete(self, path: str) -> None:
        raise NotImplementedError

    def push(self, path: str, value: Any) -> str:
        raise NotImplementedError

    def range_by_key(self, path: str, start: str, end: str) -> dict[str, Any]:
        """Children of ``path`` with ``start <= key <= end``, ordered by key."""

        raise NotImplementedError


class DocumentStore(Protocol):
    """Collection/document store (Firestore)."""

    def add(self, collection: str, data: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def get(self, collection: str, doc_id: str) -> Optional[dict]:
        raise NotImplementedError

    def list(
        self,
        collection: str,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> Sequence[tuple[str, dict]]:
        raise NotImplementedError

    def update(self, collection: str, doc_id: str, data: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def delete(self, collection: str, doc_id: str) -> None:
        raise NotImplementedError
