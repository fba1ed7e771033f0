"""
Proxy Routes - Upstream Request Forwarding
==========================================

This module implements the forwarding endpoint that lets browser clients
read cross-origin resources through the server.

Request Flow:
-------------
1. OPTIONS preflight is answered immediately (200, empty body)
2. The `url` query parameter is required; empty or missing -> 400
3. The target URL is fetched with a single GET, unvalidated
4. Upstream status, content type and body are relayed unchanged
5. Any failure of the outbound call -> 500 with the error message

Every reply carries permissive CORS headers.

Endpoints:
----------
- GET /proxy?url=<target>: Fetch and relay the target resource
- OPTIONS /proxy: CORS preflight
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from .fetcher import UpstreamFetcher
from .replies import missing_url_reply, preflight_reply, render, reply_from_result

logger = logging.getLogger(__name__)

# Create router
proxy_router = APIRouter()


# ============================================================================
# Dependencies
# ============================================================================

def get_fetcher(request: Request) -> UpstreamFetcher:
    """Dependency to get the outbound fetcher set up by create_app."""
    return request.app.state.fetcher


# ============================================================================
# Proxy Endpoints
# ============================================================================

@proxy_router.api_route("/proxy", methods=["GET", "OPTIONS"])
async def proxy(
    request: Request,
    url: Optional[str] = Query(default=None, description="Target URL to fetch"),
    fetcher: UpstreamFetcher = Depends(get_fetcher),
):
    """
    Fetch `url` server-side and relay the result.

    Returns:
        Response mirroring the upstream status, content type and body
    """
    if request.method == "OPTIONS":
        return render(preflight_reply())

    if not url:
        logger.info("Rejected proxy request without target URL")
        return render(missing_url_reply())

    logger.info("Proxying request", extra={"target_url": url})

    result = await fetcher.fetch(url)
    reply = reply_from_result(result)

    logger.info(
        f"Relayed upstream response: {reply.status_code}",
        extra={"target_url": url, "status_code": reply.status_code},
    )
    return render(reply)
