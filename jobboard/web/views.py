"""Listing page and filter form routes."""

from typing import List, Optional

from flask import Blueprint, current_app, jsonify, redirect, render_template, request

from jobboard.domain.models import JOB_TYPES, JobFilter
from jobboard.filtering import FilterValidationError, handle_filter_submission, parse_filter
from jobboard.logging import get_logger
from jobboard.persistence.store import JobStore

logger = get_logger(__name__, component="web")

bp = Blueprint("listing", __name__)


def get_store() -> JobStore:
    """Return the JobStore the app was created with."""
    return current_app.extensions["job_store"]


@bp.route("/", methods=["GET"])
def index():
    """Render approved jobs, narrowed by any filter in the query string."""
    try:
        criteria = parse_filter(request.args)
    except FilterValidationError as e:
        logger.warning(
            "Ignoring invalid filter in page URL",
            extra={"event": "filter.invalid_query_args", "errors": e.errors},
        )
        return _render_listing(JobFilter(), errors=e.errors, status=400)

    return _render_listing(criteria)


@bp.route("/filter", methods=["POST"])
def filter_jobs():
    """Validate the sidebar form and redirect to the filtered listing."""
    try:
        target = handle_filter_submission(request.form)
    except FilterValidationError as e:
        logger.warning(
            "Filter form submission rejected",
            extra={"event": "filter.validation_failed", "errors": e.errors},
        )
        return _render_listing(JobFilter(), errors=e.errors, status=400)

    logger.info(
        "Filter form submitted",
        extra={"event": "filter.redirect", "target": target},
    )
    return redirect(target, code=303)


@bp.route("/health", methods=["GET"])
def health():
    """Report whether the store answers queries."""
    if get_store().ping():
        return jsonify({"status": "ok"}), 200
    return jsonify({"status": "unavailable"}), 503


def _render_listing(
    criteria: JobFilter, errors: Optional[List[str]] = None, status: int = 200
):
    store = get_store()

    jobs = store.find_approved(None if criteria.is_empty else criteria)
    locations = store.find_distinct_approved_locations()

    logger.info(
        f"Listing loaded: {len(jobs)} jobs",
        extra={
            "event": "listing.loaded",
            "job_count": len(jobs),
            "location_count": len(locations),
            "filtered": not criteria.is_empty,
        },
    )

    return (
        render_template(
            "index.html",
            jobs=jobs,
            locations=locations,
            job_types=JOB_TYPES,
            criteria=criteria,
            errors=errors or [],
        ),
        status,
    )
