"""
Edit view builder for content types.

Typical content type:

    class Song(Item):
        title: str = ""

        def marshal_editor(self, role: str) -> bytes:
            return form(
                self,
                Field(view=input_field("title", self, {"label": "Title", "type": "text"})),
                role=role,
            )
"""

from app.cms.editor.editor import (  # noqa: F401
    ADMIN_ROLE,
    Editable,
    Editor,
    Field,
    FormBuildError,
    Mergeable,
    form,
    hidden_for,
)
from app.cms.editor.elements import (  # noqa: F401
    ElementError,
    checkbox,
    input_field,
    select,
    textarea,
    timestamp,
)
