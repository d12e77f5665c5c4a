"""
Decode pipeline

Turns a transport result into a typed model.
"""

import json
import logging
from functools import lru_cache
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from ...core.exceptions import ErrorType, HTTPError
from ...core.result import Result

logger = logging.getLogger(__name__)

T = TypeVar('T')


@lru_cache(maxsize=256)
def _adapter(schema: Any) -> TypeAdapter:
    return TypeAdapter(schema)


def decode(
    result: Result[bytes],
    schema: Type[T],
    extract: Optional[Callable[[Any], Any]] = None
) -> Result[Any]:
    """
    Deserialize a successful payload as ``schema``.

    Args:
        result: Transport result; a failure is returned unchanged
        schema: Type the payload is validated against
        extract: Applied to the validated value, for payloads nested under a
            wrapper key such as ``{"realms": [...]}``

    Returns:
        The decoded value, ``deserialization_failure`` when the payload does
        not match ``schema`` or ``unexpected_response`` when ``extract`` fails
    """
    if result.is_failure:
        return result

    try:
        value = _adapter(schema).validate_json(result.value)
    except ValidationError as e:
        logger.warning(f"Could not decode response as {_schema_name(schema)}: {e.error_count()} error(s)")
        return Result.failure(HTTPError.of(
            ErrorType.DESERIALIZATION_FAILURE,
            details={"schema": _schema_name(schema), "errors": e.errors(include_url=False)},
            original_exception=e
        ))

    if extract is None:
        return Result.success(value)

    try:
        return Result.success(extract(value))
    except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
        return Result.failure(HTTPError.of(
            ErrorType.UNEXPECTED_RESPONSE,
            details={"schema": _schema_name(schema)},
            original_exception=e
        ))


def decode_json_object(result: Result[bytes]) -> Result[Dict[str, Any]]:
    """Parse a payload that must be a JSON object."""
    if result.is_failure:
        return result

    try:
        payload = json.loads(result.value)
    except (UnicodeDecodeError, ValueError) as e:
        return Result.failure(HTTPError.of(
            ErrorType.DESERIALIZATION_FAILURE,
            original_exception=e
        ))

    if not isinstance(payload, dict):
        return Result.failure(HTTPError.of(ErrorType.UNEXPECTED_RESPONSE))
    return Result.success(payload)


def encode(value: Any, schema: Optional[Any] = None) -> bytes:
    """Serialize ``value`` to JSON using field aliases."""
    adapter = _adapter(schema if schema is not None else type(value))
    return adapter.dump_json(value, by_alias=True)


def _schema_name(schema: Any) -> str:
    return getattr(schema, "__name__", None) or repr(schema)
