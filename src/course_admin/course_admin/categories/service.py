from __future__ import annotations

import logging
from datetime import datetime

from ..common.datetime_utils import now_local, to_millis
from ..common.validators import require_key_segment, require_non_empty
from .model import Category
from .repository import CategoryRepository

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, categories: CategoryRepository):
        self._categories = categories

    def create(self, name, *, now: datetime | None = None) -> Category:
        name = require_non_empty(name, "Category name")
        created_at = to_millis(now or now_local())
        category_id = self._categories.create(name=name, created_at=created_at)
        logger.info("Created category %s", category_id)
        return Category(category_id=category_id, name=name, created_at=created_at)

    def list_all(self) -> list[Category]:
        return list(self._categories.list_all())

    def rename(self, category_id: str, name, *, now: datetime | None = None) -> Category:
        category_id = require_key_segment(category_id, "Category id")
        name = require_non_empty(name, "Category name")
        updated_at = to_millis(now or now_local())
        self._categories.rename(category_id, name=name, updated_at=updated_at)
        return Category(category_id=category_id, name=name, updated_at=updated_at)

    def delete(self, category_id: str) -> None:
        self._categories.delete(require_key_segment(category_id, "Category id"))
