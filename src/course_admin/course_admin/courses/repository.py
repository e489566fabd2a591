from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.constants import COURSES_COLLECTION
from ..database.store import DocumentStore


class CourseRepository(Protocol):
    def add(self, data: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def get(self, course_id: str) -> Optional[dict]:
        raise NotImplementedError

    def list_all(self) -> Sequence[dict]:
        raise NotImplementedError

    def update(self, course_id: str, data: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def delete(self, course_id: str) -> None:
        raise NotImplementedError


class FirestoreCourseRepository(CourseRepository):
    def __init__(self, documents: DocumentStore):
        self._documents = documents

    def add(self, data: Mapping[str, Any]) -> str:
        return self._documents.add(COURSES_COLLECTION, data)

    def get(self, course_id: str) -> Optional[dict]:
        return self._documents.get(COURSES_COLLECTION, course_id)

    def list_all(self) -> Sequence[dict]:
        return [{"id": doc_id, **data} for doc_id, data in self._documents.list(COURSES_COLLECTION)]

    def update(self, course_id: str, data: Mapping[str, Any]) -> None:
        self._documents.update(COURSES_COLLECTION, course_id, data)

    def delete(self, course_id: str) -> None:
        self._documents.delete(COURSES_COLLECTION, course_id)
