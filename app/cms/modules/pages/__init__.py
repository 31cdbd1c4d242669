"""
Pages module.

- Page: internal content edited from the admin
- Submission: externally submitted page awaiting approval (Mergeable)
"""

from app.cms.content import ContentRegistry
from app.cms.modules.pages.models import Page, Submission


def register(registry: ContentRegistry) -> None:
    registry.register("Page", Page)
    registry.register("Submission", Submission)
