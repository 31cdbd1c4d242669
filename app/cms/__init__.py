import logging
import uuid
from collections.abc import Mapping
from typing import Any

from flask import Flask, g, render_template
from dotenv import load_dotenv

from app.cms.config import load_config
from app.cms.content import ContentRegistry
from app.cms.editor import FormBuildError
from app.cms.rbac import RoleResolver, load_current_role
from app.cms.routes import bp as routes_bp
from app.cms.admin import bp as admin_bp


def create_app(
    test_config: Mapping[str, Any] | None = None,
    *,
    registry: ContentRegistry | None = None,
    role_resolver: RoleResolver | None = None,
) -> Flask:
    load_dotenv()
    app = Flask(__name__, template_folder="templates")
    app.config.from_mapping(load_config())
    if test_config:
        app.config.from_mapping(test_config)

    logging.basicConfig(level=app.config.get("LOG_LEVEL") or "INFO")

    # Production guardrails (fail fast with clear logs)
    env = (app.config.get("ENV") or "").strip().lower()
    if env in ("prod", "production"):
        if not app.config.get("SECRET_KEY") or str(app.config["SECRET_KEY"]) in ("", "change-me"):
            raise RuntimeError("SECRET_KEY must be set to a strong value in production (not default).")

    if registry is None:
        from app.cms.modules import pages

        registry = ContentRegistry()
        pages.register(registry)
    app.extensions["content_registry"] = registry
    if role_resolver is not None:
        app.extensions["role_resolver"] = role_resolver

    @app.before_request
    def _assign_request_id():
        if not getattr(g, "request_id", None):
            g.request_id = uuid.uuid4().hex

    app.before_request(load_current_role)

    app.register_blueprint(routes_bp)
    app.register_blueprint(admin_bp, url_prefix="/admin")

    @app.errorhandler(FormBuildError)
    def _err_form_build(e):  # type: ignore[no-redef]
        app.logger.exception("Edit form construction failed (request_id=%s): %s", getattr(g, "request_id", None), e)
        return render_template("errors/500.html"), 500

    @app.errorhandler(500)
    def _err_500(e):  # type: ignore[no-redef]
        app.logger.exception("Unhandled 500 (request_id=%s)", getattr(g, "request_id", None))
        return render_template("errors/500.html"), 500

    @app.errorhandler(400)
    def _err_400(e):  # type: ignore[no-redef]
        return render_template("errors/400.html", message=getattr(e, "description", None)), 400

    @app.errorhandler(403)
    def _err_403(e):  # type: ignore[no-redef]
        missing = getattr(g, "missing_role", None)
        if missing:
            app.logger.warning("Forbidden: role=%r required=%s request_id=%s", getattr(g, "role", None), missing, getattr(g, "request_id", None))
        return render_template("errors/403.html", missing_role=missing), 403

    @app.errorhandler(404)
    def _err_404(e):  # type: ignore[no-redef]
        return render_template("errors/404.html"), 404

    logging.getLogger(__name__).info("create_app() complete; app ready to serve")

    return app
