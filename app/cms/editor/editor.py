"""
Edit view assembly for content items.

A content type describes its edit page as an ordered list of Fields (pre-rendered
markup plus the roles the field is hidden from). `form()` composes those fields
with the system-managed fields and the workflow controls into one <table>
fragment that the admin layer embeds inside a <form>.

Rules:
- the admin role sees every field; any other role listed on a field gets that
  field wrapped in a display:none div (still submitted with the form)
- slug, timestamp and updated are always appended after the caller's fields
- delete is offered to admins only; approve/reject is offered whenever the
  item is Mergeable, regardless of role
"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from app.cms.editor import assets
from app.cms.editor.elements import input_field, timestamp

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"

_HIDDEN_OPEN = b'<div style="display:none;">'
_HIDDEN_CLOSE = b"</div>"


class FormBuildError(RuntimeError):
    pass


def _defines(C: type, name: str) -> bool:
    for B in C.__mro__:
        if name in B.__dict__:
            return callable(B.__dict__[name])
    return False


class Editable(ABC):
    """Content that can render its own edit view."""

    @abstractmethod
    def marshal_editor(self, role: str) -> bytes:
        raise NotImplementedError

    @classmethod
    def __subclasshook__(cls, C: type) -> Any:
        if cls is Editable:
            return _defines(C, "marshal_editor")
        return NotImplemented


class Mergeable(ABC):
    """
    Externally submitted content awaiting approval. Only the presence of this
    capability matters to the editor.
    """

    @abstractmethod
    def approve(self, request: Any) -> None:
        """Copy the submission into the internal collection and re-sort its type."""
        raise NotImplementedError

    @classmethod
    def __subclasshook__(cls, C: type) -> Any:
        if cls is Mergeable:
            return _defines(C, "approve")
        return NotImplemented


@dataclass(frozen=True)
class Field:
    view: bytes
    roles: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        view = self.view
        if isinstance(view, str):
            view = view.encode("utf-8")
        elif isinstance(view, (bytearray, memoryview)):
            view = bytes(view)
        elif not isinstance(view, bytes):
            raise TypeError(f"Field.view must be bytes, got {type(view).__name__}")
        object.__setattr__(self, "view", view)

        roles: Iterable[str] = self.roles or ()
        if isinstance(roles, str):
            roles = (roles,)
        object.__setattr__(self, "roles", tuple(roles))


def hidden_for(role: str, roles: Iterable[str]) -> bool:
    if role == ADMIN_ROLE:
        return False
    return role in roles


class Editor:
    """
    Single-use builder for one edit view. The buffer is append-only; the
    document is read out once at the end of `form()`.
    """

    def __init__(self, role: str, view_buf: io.BytesIO | None = None) -> None:
        self.role = role or ""
        self.view_buf = view_buf if view_buf is not None else io.BytesIO()
        self._used = False

    def _write(self, data: bytes | str, what: str = "HTML string") -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        try:
            self.view_buf.write(data)
        except (OSError, MemoryError, ValueError) as e:
            logger.error("Error writing %s to editor form buffer: %s", what, e)
            raise FormBuildError(f"Error writing {what} to editor form buffer") from e

    def add_field(self, field: Field) -> None:
        view = field.view
        if hidden_for(self.role, field.roles):
            view = _HIDDEN_OPEN + view + _HIDDEN_CLOSE
        self._write(view, "field view")

    def default_fields(self, post: Any) -> list[Field]:
        return [
            Field(
                view=input_field(
                    "slug",
                    post,
                    {
                        "label": "URL Slug",
                        "type": "text",
                        "disabled": "true",
                        "placeholder": "Will be set automatically",
                    },
                ),
            ),
            Field(
                view=timestamp(
                    "timestamp",
                    post,
                    {
                        "type": "hidden",
                        "class": "timestamp __cms",
                    },
                ),
            ),
            Field(
                view=timestamp(
                    "updated",
                    post,
                    {
                        "type": "hidden",
                        "class": "updated __cms",
                    },
                ),
            ),
        ]

    def controls(self, post: Any) -> str:
        is_admin = self.role == ADMIN_ROLE
        mergeable = isinstance(post, Mergeable)
        logger.debug("Editor controls: role=%r delete=%s approval=%s", self.role, is_admin, mergeable)

        out = assets.ADMIN_CONTROLS if is_admin else assets.SAVE_CONTROLS
        if mergeable:
            out += assets.APPROVAL_CONTROLS
        return out

    def form(self, post: Any, *fields: Field) -> bytes:
        if post is None:
            raise ValueError("post is required")
        if not isinstance(post, Editable):
            raise TypeError(f"{type(post).__name__} is not editable (missing marshal_editor)")
        for f in fields:
            if not isinstance(f, Field):
                raise TypeError(f"expected Field, got {type(f).__name__}")
        if self._used:
            raise RuntimeError("Editor instances are single-use")
        self._used = True

        logger.debug("Building edit form for %s with %d field(s)", type(post).__name__, len(fields))

        self._write('<table><tbody class="row"><tr class="col s8 editor-fields"><td class="col s12">')
        for f in fields:
            self.add_field(f)
        self._write("</td></tr>")

        # system-managed fields every content item carries
        self._write('<tr class="col s4 default-fields"><td class="col s12">')
        self._write(assets.PUBLISH_TIME)
        for f in self.default_fields(post):
            self.add_field(f)

        self._write(self.controls(post) + assets.EDITOR_SCRIPT + "</td></tr></tbody></table>")

        return bytes(self.view_buf.getvalue())


def form(post: Any, *fields: Field, role: str) -> bytes:
    """Build the edit view for `post` as seen by `role`."""
    return Editor(role).form(post, *fields)
