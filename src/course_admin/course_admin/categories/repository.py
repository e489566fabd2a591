from __future__ import annotations

from typing import Protocol, Sequence

from ..core.constants import CATEGORIES_ROOT
from ..database.store import RealtimeStore
from .model import Category


class CategoryRepository(Protocol):
    def create(self, *, name: str, created_at: int) -> str:
        raise NotImplementedError

    def list_all(self) -> Sequence[Category]:
        raise NotImplementedError

    def rename(self, category_id: str, *, name: str, updated_at: int) -> None:
        raise NotImplementedError

    def delete(self, category_id: str) -> None:
        raise NotImplementedError


class RealtimeCategoryRepository(CategoryRepository):
    def __init__(self, store: RealtimeStore):
        self._store = store

    def create(self, *, name: str, created_at: int) -> str:
        return self._store.push(CATEGORIES_ROOT, {"name": name, "createdAt": created_at})

    def list_all(self) -> Sequence[Category]:
        rows = self._store.get(CATEGORIES_ROOT) or {}
        return [
            Category(
                category_id=key,
                name=row.get("name", ""),
                created_at=row.get("createdAt"),
                updated_at=row.get("updatedAt"),
            )
            for key, row in rows.items()
            if isinstance(row, dict)
        ]

    def rename(self, category_id: str, *, name: str, updated_at: int) -> None:
        self._store.update(f"{CATEGORIES_ROOT}/{category_id}", {"name": name, "updatedAt": updated_at})

    def delete(self, category_id: str) -> None:
        self._store.delete(f"{CATEGORIES_ROOT}/{category_id}")
