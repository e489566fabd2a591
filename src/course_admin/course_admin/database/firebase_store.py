from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional, Sequence

from firebase_admin import exceptions as firebase_exceptions
from firebase_admin import firestore
from google.api_core import exceptions as google_exceptions

from ..core.exceptions import NotFoundError, UpstreamError
from .connection import FirebaseConnection
from .store import DocumentStore, RealtimeStore


@contextmanager
def upstream_errors(action: str) -> Iterator[None]:
    """Translate SDK failures into UpstreamError so the HTTP layer can report them."""
    try:
        yield
    except google_exceptions.NotFound as e:
        raise NotFoundError(f"{action} failed: not found") from e
    except (firebase_exceptions.FirebaseError, google_exceptions.GoogleAPIError) as e:
        raise UpstreamError(f"{action} failed: {e}") from e


class FirebaseRealtimeStore(RealtimeStore):
    def __init__(self, conn: FirebaseConnection):
        self._conn = conn

    def get(self, path: str) -> Any:
        with upstream_errors(f"read {path}"):
            return self._conn.reference(path).get()

    def keys(self, path: str) -> list[str]:
        with upstream_errors(f"read keys of {path}"):
            shallow = self._conn.reference(path).get(shallow=True)
        if not isinstance(shallow, dict):
            return []
        return sorted(shallow)

    def set(self, path: str, value: Any) -> None:
        with upstream_errors(f"write {path}"):
            self._conn.reference(path).set(value)

    def update(self, path: str, values: Mapping[str, Any]) -> None:
        with upstream_errors(f"update {path}"):
            self._conn.reference(path).update(dict(values))

    def delete(self, path: str) -> None:
        with upstream_errors(f"delete {path}"):
            self._conn.reference(path).delete()

    def push(self, path: str, value: Any) -> str:
        with upstream_errors(f"push to {path}"):
            return self._conn.reference(path).push(value).key

    def range_by_key(self, path: str, start: str, end: str) -> dict[str, Any]:
        with upstream_errors(f"range query on {path}"):
            result = self._conn.reference(path).order_by_key().start_at(start).end_at(end).get()
        return dict(result or {})


class FirestoreDocumentStore(DocumentStore):
    def __init__(self, conn: FirebaseConnection):
        self._conn = conn

    def _collection(self, name: str):
        return self._conn.firestore().collection(name)

    def add(self, collection: str, data: Mapping[str, Any]) -> str:
        with upstream_errors(f"add to {collection}"):
            _, ref = self._collection(collection).add(dict(data))
        return ref.id

    def get(self, collection: str, doc_id: str) -> Optional[dict]:
        with upstream_errors(f"read {collection}/{doc_id}"):
            snapshot = self._collection(collection).document(doc_id).get()
        return snapshot.to_dict() if snapshot.exists else None

    def list(
        self,
        collection: str,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> Sequence[tuple[str, dict]]:
        query = self._collection(collection)
        if order_by:
            direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
            query = query.order_by(order_by, direction=direction)
        with upstream_errors(f"list {collection}"):
            return [(doc.id, doc.to_dict()) for doc in query.stream()]

    def update(self, collection: str, doc_id: str, data: Mapping[str, Any]) -> None:
        with upstream_errors(f"update {collection}/{doc_id}"):
            self._collection(collection).document(doc_id).update(dict(data))

    def delete(self, collection: str, doc_id: str) -> None:
        with upstream_errors(f"delete {collection}/{doc_id}"):
            self._collection(collection).document(doc_id).delete()
