from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Category:
    category_id: str
    name: str
    created_at: Optional[int] = None
    updated_at: Optional[int] = None

    def to_dict(self) -> dict:
        data = {"id": self.category_id, "name": self.name, "createdAt": self.created_at}
        if self.updated_at is not None:
            data["updatedAt"] = self.updated_at
        return data
