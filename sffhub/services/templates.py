# sffhub/services/templates.py
from __future__ import annotations

from typing import List, Optional, Union
from uuid import UUID

from ..errors import NotFoundError
from ..models import Template
from ..store import TEMPLATES_TABLE


class TemplateManager:
    """Canned-message CRUD. Bodies are stored as-is; placeholders are not checked."""

    def __init__(self, store):
        self.store = store

    def list(self) -> List[Template]:
        rows = self.store.select(TEMPLATES_TABLE, order="name")
        return [Template.model_validate(r) for r in rows]

    def get(self, template_id: Union[UUID, str]) -> Template:
        row = self.store.select_one(TEMPLATES_TABLE, {"id": template_id})
        if row is None:
            raise NotFoundError("Template", str(template_id))
        return Template.model_validate(row)

    def create(self, name: str, subject: Optional[str], body: str) -> Template:
        row = self.store.insert(TEMPLATES_TABLE, {"name": name, "subject": subject, "body": body})
        return Template.model_validate(row)

    def update(self, template_id: Union[UUID, str], name: str, subject: Optional[str], body: str) -> None:
        self.store.update(
            TEMPLATES_TABLE,
            {"name": name, "subject": subject, "body": body},
            {"id": template_id},
        )

    def delete(self, template_id: Union[UUID, str]) -> None:
        self.store.delete(TEMPLATES_TABLE, {"id": template_id})
