from __future__ import annotations

import copy
from datetime import datetime
from typing import Any, Mapping, Optional

import pytest

from src.course_admin.course_admin.container import build_container
from src.course_admin.course_admin.core.exceptions import NotFoundError
from src.course_admin.course_admin.main import create_app


def _segments(path: str) -> list[str]:
    return [s for s in path.split("/") if s]


class InMemoryRealtimeStore:
    """Nested-dict stand-in for the realtime database."""

    def __init__(self, data: Optional[dict] = None):
        self.data: dict = copy.deepcopy(data or {})
        self.update_calls: list[tuple[str, dict]] = []
        self._seq = 0

    def _node(self, path: str):
        node: Any = self.data
        for seg in _segments(path):
            if not isinstance(node, dict) or seg not in node:
                return None
            node = node[seg]
        return node

    def get(self, path: str) -> Any:
        return copy.deepcopy(self._node(path))

    def keys(self, path: str) -> list[str]:
        node = self._node(path)
        return sorted(node) if isinstance(node, dict) else []

    def set(self, path: str, value: Any) -> None:
        segs = _segments(path)
        if value is None:
            self.delete(path)
            return
        if not segs:
            self.data = copy.deepcopy(value)
            return
        parent = self.data
        for seg in segs[:-1]:
            if not isinstance(parent.get(seg), dict):
                parent[seg] = {}
            parent = parent[seg]
        parent[segs[-1]] = copy.deepcopy(value)

    def update(self, path: str, values: Mapping[str, Any]) -> None:
        self.update_calls.append((path, dict(values)))
        for key, value in values.items():
            self.set(f"{path}/{key}", value)

    def delete(self, path: str) -> None:
        segs = _segments(path)
        parent = self._node("/".join(segs[:-1]))
        if isinstance(parent, dict):
            parent.pop(segs[-1], None)

    def push(self, path: str, value: Any) -> str:
        self._seq += 1
        key = f"-N{self._seq:08d}"
        self.set(f"{path}/{key}", value)
        return key

    def range_by_key(self, path: str, start: str, end: str) -> dict[str, Any]:
        node = self._node(path)
        if not isinstance(node, dict):
            return {}
        return {k: copy.deepcopy(node[k]) for k in sorted(node) if start <= k <= end}


class InMemoryDocumentStore:
    def __init__(self):
        self.collections: dict[str, dict[str, dict]] = {}
        self._seq = 0

    def add(self, collection: str, data: Mapping[str, Any]) -> str:
        self._seq += 1
        doc_id = f"doc{self._seq}"
        self.collections.setdefault(collection, {})[doc_id] = dict(data)
        return doc_id

    def get(self, collection: str, doc_id: str) -> Optional[dict]:
        doc = self.collections.get(collection, {}).get(doc_id)
        return dict(doc) if doc is not None else None

    def list(self, collection: str, *, order_by: Optional[str] = None, descending: bool = False):
        items = [(doc_id, dict(doc)) for doc_id, doc in self.collections.get(collection, {}).items()]
        if order_by:
            items.sort(key=lambda item: item[1].get(order_by) or "", reverse=descending)
        return items

    def update(self, collection: str, doc_id: str, data: Mapping[str, Any]) -> None:
        docs = self.collections.get(collection, {})
        if doc_id not in docs:
            raise NotFoundError(f"update {collection}/{doc_id} failed: not found")
        docs[doc_id].update(data)

    def delete(self, collection: str, doc_id: str) -> None:
        self.collections.get(collection, {}).pop(doc_id, None)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 20, 9, 30, 0)


@pytest.fixture
def realtime() -> InMemoryRealtimeStore:
    return InMemoryRealtimeStore()


@pytest.fixture
def documents() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def container(realtime, documents):
    return build_container(realtime=realtime, documents=documents)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
