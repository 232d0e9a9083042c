"""
Validation of inputs FastAPI cannot type for us, such as query strings
that need coercion before they reach a schema.
"""

from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

from jobboard.core.errors import BadRequestError, format_validation_errors

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_payload(model: Type[ModelT], data: Mapping[str, Any]) -> ModelT:
    """
    Validate data against model.

    Raises:
        BadRequestError: With every violation message, in order
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise BadRequestError(format_validation_errors(e.errors()))


def coerce_number(value: str):
    """
    Turn a query-string value into an int or float when it reads as one.

    Anything else comes back unchanged so schema validation reports it.
    """
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value
