"""Request body validation for Starlette endpoints.

Example:
    >>> from starlette.applications import Starlette
    >>> from starlette.responses import JSONResponse
    >>> from starlette.routing import Route
    >>>
    >>> @validate_request_body({"name": "string", "age": "number"})
    ... async def create_user(request):
    ...     return JSONResponse(await request.json(), status_code=201)
    >>>
    >>> app = Starlette(routes=[Route("/users", create_user, methods=["POST"])])
"""

import inspect
import json
import logging
from collections.abc import Mapping
from functools import wraps
from typing import Any, Awaitable, Callable

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from typso.validator import MISSING, ValidationError, Validator, get_validator

logger = logging.getLogger(__name__)

Endpoint = Callable[[Request], Any]


async def read_body(request: Request) -> Any:
    """Decode a JSON request body; an empty body is ``MISSING``.

    Raises:
        ValueError: If the body is not valid JSON
    """
    body = await request.body()
    if not body:
        return MISSING
    return json.loads(body)


def validate_request_body(
    schema: Mapping[str, Any], validator: Validator | None = None
) -> Callable[[Endpoint], Callable[[Request], Awaitable[Response]]]:
    """Validate the JSON body of every request against ``schema``.

    A failed check, or an exception raised by a predicate in the schema,
    becomes a 400 response ``{"error": message}``; the endpoint is not called.
    Otherwise the request is forwarded unchanged.
    Under a warn-only validator failures are logged and the request is
    always forwarded.

    Args:
        schema: Mapping of field name to descriptor
        validator: Validator to use; defaults to the process default per request
    """

    def decorator(endpoint: Endpoint) -> Callable[[Request], Awaitable[Response]]:
        @wraps(endpoint)
        async def wrapper(request: Request) -> Response:
            try:
                body = await read_body(request)
            except ValueError as e:
                logger.info(f"Rejected {request.method} {request.url.path}: invalid JSON body")
                return JSONResponse({"error": f"Invalid JSON body: {e}"}, status_code=400)

            try:
                (validator or get_validator()).check_object(body, schema)
            except ValidationError as e:
                logger.info(f"Rejected {request.method} {request.url.path}: {e.message}")
                return JSONResponse({"error": e.message}, status_code=400)
            except Exception as e:
                # A raising predicate is a client error, not a server crash
                logger.warning(f"Rejected {request.method} {request.url.path}: {e!r}")
                return JSONResponse({"error": str(e)}, status_code=400)

            if inspect.iscoroutinefunction(endpoint):
                return await endpoint(request)
            return await run_in_threadpool(endpoint, request)

        return wrapper

    return decorator
