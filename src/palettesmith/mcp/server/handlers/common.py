"""Common helpers for MCP handler functions.

Eliminates repeated boilerplate across handler files:
- Argument validation against a pydantic schema, with config defaults
- Error-as-JSON wrapping
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from functools import wraps
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from palettesmith.core.errors import InvalidArgumentError

logger = logging.getLogger("palettesmith.mcp")

ArgsT = TypeVar("ArgsT", bound=BaseModel)


def parse_args(
    schema: type[ArgsT],
    args: Mapping[str, Any] | None,
    defaults: Mapping[str, Any] | None = None,
) -> ArgsT:
    """Validate tool arguments, filling omitted keys from ``defaults`` first.

    Raises:
        InvalidArgumentError: Listing every field that failed validation.
    """
    data = {**(defaults or {}), **(args or {})}
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidArgumentError(f"Invalid arguments: {problems}") from e


def to_json(payload: Any) -> str:
    return json.dumps(payload, indent=2)


def handler_error_json(
    fn: Callable[..., str],
) -> Callable[..., str]:
    """Decorator that wraps handler exceptions into JSON error responses.

    Catches Exception, logs it, and returns
    ``{"error": "<message>", "error_type": "<class name>"}``.
    """

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> str:
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            logger.debug("Handler %s failed: %s", fn.__name__, e, exc_info=True)
            return to_json({"error": str(e), "error_type": type(e).__name__})

    return wrapper
