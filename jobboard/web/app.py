"""Flask application factory for the job listing page."""

import time
from typing import Optional
from uuid import uuid4

from flask import Flask, g, render_template, request

from jobboard.config.models import AppConfig
from jobboard.logging import get_logger
from jobboard.logging.context import pop_log_context, push_log_context
from jobboard.persistence.exceptions import StoreUnavailableError
from jobboard.persistence.store import JobStore
from jobboard.utils.formatting import format_money, relative_date

logger = get_logger(__name__, component="web")


def create_app(store: JobStore, app_config: Optional[AppConfig] = None) -> Flask:
    """Build the Flask app around an injected JobStore.

    Args:
        store: Read capability for postings and locations
        app_config: Site and server settings (defaults when omitted)

    Returns:
        Configured Flask application
    """
    app_config = app_config or AppConfig()

    app = Flask(__name__)
    app.extensions["job_store"] = store
    app.config["SITE"] = app_config.site

    app.add_template_filter(format_money, "money")
    app.add_template_filter(relative_date, "relative_date")

    @app.context_processor
    def inject_site():
        return {"site": app.config["SITE"]}

    @app.before_request
    def bind_request_context():
        g.request_id = request.headers.get("X-Request-ID") or uuid4().hex
        g.request_started = time.perf_counter()
        g.log_token = push_log_context(
            request_id=g.request_id,
            method=request.method,
            path=request.path,
        )

    @app.after_request
    def log_request(response):
        duration_ms = (time.perf_counter() - g.request_started) * 1000
        logger.info(
            f"{request.method} {request.path} {response.status_code}",
            extra={
                "event": "request.completed",
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        response.headers["X-Request-ID"] = g.request_id
        return response

    @app.teardown_request
    def unbind_request_context(exc):
        token = g.pop("log_token", None)
        if token is not None:
            pop_log_context(token)

    @app.errorhandler(StoreUnavailableError)
    def store_unavailable(e):
        logger.error(
            f"Job store unavailable: {e}",
            extra={"event": "store.query_failed", "error_type": type(e).__name__},
            exc_info=e,
        )
        return render_template("error.html", message="Jobs are unavailable right now. Please try again later."), 503

    from .views import bp

    app.register_blueprint(bp)

    return app
