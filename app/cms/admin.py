from flask import Blueprint, abort, current_app, g, render_template, request
from markupsafe import Markup

from app.cms.content import NEW_ITEM_ID, ContentRegistry, UnknownContentType
from app.cms.rbac import current_role, require_role

bp = Blueprint("admin", __name__)


def _registry() -> ContentRegistry:
    return current_app.extensions["content_registry"]


def _parse_item_id(raw: str | None) -> int | None:
    raw = (raw or "").strip()
    if not raw:
        return NEW_ITEM_ID
    try:
        return int(raw)
    except ValueError:
        return None


@bp.get("/")
@require_role()
def index():
    return render_template("admin/index.html", content_types=_registry().names())


@bp.get("/edit")
@require_role()
def edit():
    type_name = (request.args.get("type") or "").strip()
    if not type_name:
        abort(400)
    item_id = _parse_item_id(request.args.get("id"))
    if item_id is None:
        abort(400)
    status = (request.args.get("status") or "").strip()

    try:
        post = _registry().load(type_name, item_id, status)
    except UnknownContentType:
        abort(404)
    if post is None:
        abort(404)

    role = current_role()
    view = post.marshal_editor(role)
    current_app.logger.info(
        "Edit view rendered type=%s id=%s role=%s bytes=%d request_id=%s",
        type_name,
        item_id,
        role,
        len(view),
        getattr(g, "request_id", None),
    )
    return render_template(
        "admin/edit.html",
        view=Markup(view.decode("utf-8")),
        type_name=type_name,
        item_id=item_id,
        status=status,
    )
