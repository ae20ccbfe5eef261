"""Filter form handling: validation and redirect target construction.

The sidebar form posts its raw fields here. They are validated against the
JobFilter schema and turned into a canonical query string that contains only
the criteria the visitor actually supplied.
"""

from typing import Any, Dict, List, Mapping
from urllib.parse import urlencode

from pydantic import ValidationError

from jobboard.domain.models import JobFilter

FILTER_FIELDS = ("query", "type", "location", "remote")


class FilterValidationError(Exception):
    """Raised when submitted filter fields violate the schema.

    Attributes:
        errors: One readable message per offending field
    """

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("Invalid filter: " + "; ".join(errors))

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "FilterValidationError":
        errors = []
        for error in exc.errors():
            field_path = ".".join(str(loc) for loc in error["loc"]) or "form"
            errors.append(f"{field_path}: {error['msg']}")
        return cls(errors)


def parse_filter(raw: Mapping[str, Any]) -> JobFilter:
    """Validate raw form or query-string values into a JobFilter.

    Args:
        raw: Field name to submitted value. Unknown keys are ignored.

    Returns:
        Validated JobFilter

    Raises:
        FilterValidationError: If any recognized field is invalid
    """
    values = {key: raw[key] for key in FILTER_FIELDS if key in raw}
    try:
        return JobFilter.model_validate(values)
    except ValidationError as e:
        raise FilterValidationError.from_pydantic(e) from e


def build_query_params(criteria: JobFilter) -> Dict[str, str]:
    """Map a JobFilter to query parameters, omitting absent fields.

    ``remote`` is emitted as the literal "true" only when set.
    """
    params: Dict[str, str] = {}
    if criteria.query:
        params["query"] = criteria.query.strip()
    if criteria.type:
        params["type"] = criteria.type
    if criteria.location:
        params["location"] = criteria.location
    if criteria.remote:
        params["remote"] = "true"
    return params


def build_redirect_target(criteria: JobFilter, path: str = "/") -> str:
    """Build the URL the filter form redirects to.

    Example:
        >>> build_redirect_target(JobFilter(query="microsoft", remote=True))
        '/?query=microsoft&remote=true'
    """
    return f"{path}?{urlencode(build_query_params(criteria))}"


def handle_filter_submission(raw: Mapping[str, Any], path: str = "/") -> str:
    """Validate a filter form submission and return its redirect target.

    Raises:
        FilterValidationError: If the submission is invalid; no target is built
    """
    return build_redirect_target(parse_filter(raw), path=path)
