"""
Validators
"""
from typing import Type, TypeVar

from pydantic import BaseModel, HttpUrl, TypeAdapter, ValidationError
from starlette.datastructures import QueryParams

from app.core.exceptions import BadRequestError

ModelT = TypeVar("ModelT", bound=BaseModel)

_http_url = TypeAdapter(HttpUrl)


def format_validation_errors(errors) -> str:
    """Join pydantic error entries into one readable message"""
    parts = []
    for err in errors:
        location = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "query"))
        parts.append(f"{location}: {err.get('msg')}" if location else err.get("msg", ""))
    return "; ".join(parts)


def parse_query_filters(query_params: QueryParams, model: Type[ModelT]) -> ModelT:
    """
    Validate a search query string against a filter model.

    Only the model's public (alias) names are accepted and each may appear
    at most once.

    Raises:
        BadRequestError: unknown, repeated or invalid parameters
    """
    allowed = {field.alias or name for name, field in model.model_fields.items()}
    for key in query_params.keys():
        if key not in allowed:
            raise BadRequestError(f"{key} is not a valid filter")
        if len(query_params.getlist(key)) > 1:
            raise BadRequestError(f"{key} appears more than once")

    try:
        return model.model_validate(dict(query_params))
    except ValidationError as exc:
        raise BadRequestError(format_validation_errors(exc.errors())) from exc


def blank_to_none(value):
    """Treat an empty query string value (``?minSalary=``) as not given"""
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def check_http_url(value):
    """
    Reject anything that is not an http(s) URL.

    The value is stored as the caller wrote it, not in pydantic's
    normalized form.
    """
    if value is None:
        return value
    try:
        _http_url.validate_python(value)
    except ValidationError as exc:
        raise ValueError("must be a valid http(s) URL") from exc
    return value
