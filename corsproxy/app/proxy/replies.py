"""
Reply construction for the forwarding handler.

Every path through the handler ends in a ProxyReply built here, so the CORS
headers and the fixed error payloads live in one place.
"""

import json
from typing import Dict, Optional

from fastapi import Response, status

from ..models import ErrorResponse, FetchFailure, FetchResult, ProxyReply

DEFAULT_CONTENT_TYPE = "text/plain"
JSON_CONTENT_TYPE = "application/json"

MISSING_URL_MESSAGE = "Missing URL parameter"
FETCH_FAILED_MESSAGE = "Fetch failed"

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def cors_headers() -> Dict[str, str]:
    return dict(CORS_HEADERS)


def _json_reply(status_code: int, payload: ErrorResponse) -> ProxyReply:
    body = json.dumps(payload.model_dump(exclude_none=True), separators=(",", ":"))
    return ProxyReply(
        status_code=status_code,
        content_type=JSON_CONTENT_TYPE,
        body=body,
        headers=cors_headers(),
    )


def preflight_reply() -> ProxyReply:
    """OPTIONS answer: 200, no body, CORS headers only."""
    return ProxyReply(status_code=status.HTTP_200_OK, headers=cors_headers())


def missing_url_reply() -> ProxyReply:
    return _json_reply(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(error=MISSING_URL_MESSAGE),
    )


def fetch_failed_reply(details: str) -> ProxyReply:
    return _json_reply(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(error=FETCH_FAILED_MESSAGE, details=details),
    )


def reply_from_result(result: FetchResult) -> ProxyReply:
    """
    Map an outbound fetch result to the client reply.

    Success passes the upstream status through untouched, including 4xx and
    5xx. Any failure becomes a 500 carrying the error message.
    """
    if isinstance(result, FetchFailure):
        return fetch_failed_reply(result.message)

    return ProxyReply(
        status_code=result.status_code,
        content_type=result.content_type or DEFAULT_CONTENT_TYPE,
        body=result.body,
        encoding=result.encoding,
        headers=cors_headers(),
    )


def render(reply: ProxyReply) -> Response:
    """
    Turn a ProxyReply into a Starlette response.

    Content-Type goes in as a raw header rather than media_type so the
    framework does not append a charset to text/* types.
    """
    headers = dict(reply.headers)
    content_type: Optional[str] = reply.content_type
    if content_type is not None:
        headers["Content-Type"] = content_type

    content = reply.body.encode(reply.encoding, errors="replace") if reply.body else b""
    return Response(content=content, status_code=reply.status_code, headers=headers)
