from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from app.cms.content import Item
from app.cms.editor import Field, Mergeable, checkbox, form, input_field, select, textarea

logger = logging.getLogger(__name__)

CATEGORIES = {
    "news": "News",
    "guide": "Guide",
    "reference": "Reference",
}

TAGS = {
    "featured": "Featured",
    "archived": "Archived",
    "internal": "Internal",
}


@dataclass
class Page(Item):
    title: str = ""
    body: str = ""
    category: str = ""
    tags: list[str] = field(default_factory=list)

    def editor_fields(self) -> list[Field]:
        return [
            Field(view=input_field("title", self, {"label": "Title", "type": "text", "placeholder": "Enter the title here"})),
            Field(view=textarea("body", self, {"label": "Body"})),
            Field(view=select("category", self, {"label": "Category"}, CATEGORIES)),
            # tags are curated by editors
            Field(view=checkbox("tags", self, {"label": "Tags"}, TAGS), roles=("contributor",)),
        ]

    def marshal_editor(self, role: str) -> bytes:
        return form(self, *self.editor_fields(), role=role)


@dataclass
class Submission(Page, Mergeable):
    """A page submitted through the public API, pending review."""

    submitter_email: str = ""
    approved: bool = False

    def editor_fields(self) -> list[Field]:
        return super().editor_fields() + [
            Field(
                view=input_field("submitter_email", self, {"label": "Submitted by", "type": "email", "disabled": "true"}),
                roles=("contributor",),
            ),
        ]

    def approve(self, request: Any) -> None:
        self.approved = True
        logger.info("Submission approved id=%s uuid=%s", self.id, self.uuid)
