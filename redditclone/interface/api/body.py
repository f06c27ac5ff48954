"""JSON request body parsing.

Bodies are read and validated by hand so malformed input gets the
{"error": ...} answers clients expect instead of FastAPI's default 422.
"""

from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from redditclone.interface.error import HTTPError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _is_decode_error(error: ValidationError) -> bool:
    return any(e["type"] == "json_invalid" for e in error.errors())


def _reason(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    message = first["msg"].removeprefix("Value error, ")
    return f"{location}: {message}" if location else message


def require_json_content_type(request: Request) -> None:
    """Reject requests whose Content-Type is not application/json.

    Parameters such as charset are allowed.

    Raises:
        HTTPError: 400 {"error": "invalid Content-Type"}
    """
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != "application/json":
        raise HTTPError(400, "invalid Content-Type", field="error")


async def parse_body(
    request: Request,
    model: type[ModelT],
    decode_error: str,
    strict_schema: bool = False,
) -> ModelT:
    """Decode and validate a JSON body.

    Args:
        request: Incoming request
        model: Pydantic model for the body
        decode_error: Message for bodies that are not valid JSON
        strict_schema: Report schema violations with decode_error too,
            instead of the first validation message

    Returns:
        Validated body

    Raises:
        HTTPError: 400 {"error": ...} for undecodable or invalid bodies
    """
    raw = await request.body()
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        if strict_schema or _is_decode_error(e):
            raise HTTPError(400, decode_error, field="error")
        raise HTTPError(400, _reason(e), field="error")
