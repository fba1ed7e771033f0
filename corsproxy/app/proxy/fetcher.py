"""
Outbound fetch for the forwarding handler.

Issues one GET per call and reports the outcome as a FetchResult value
instead of raising. A fresh client is opened for every call, so nothing is
pooled or shared between inbound requests.
"""

import logging
from typing import Optional

import httpx

from ..models import FetchFailure, FetchResult, FetchSuccess

logger = logging.getLogger(__name__)


def _raw_content_type(response: httpx.Response) -> Optional[str]:
    """
    Content-Type exactly as the upstream sent it.

    Header bytes are decoded as latin-1 so they are written back byte for
    byte; httpx would otherwise decode non-ASCII values as UTF-8.
    """
    for name, value in response.headers.raw:
        if name.lower() == b"content-type":
            return value.decode("latin-1")
    return None


class UpstreamFetcher:
    """
    Fetches caller-supplied URLs.

    Args:
        timeout: Seconds to wait for the upstream, or None to wait forever
        follow_redirects: Follow 3xx responses like a browser fetch does
        transport: Optional httpx transport (tests inject httpx.MockTransport)
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        follow_redirects: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = httpx.Timeout(timeout)
        self.follow_redirects = follow_redirects
        self.transport = transport

    @classmethod
    def from_settings(cls, settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "UpstreamFetcher":
        return cls(
            timeout=settings.UPSTREAM_TIMEOUT,
            follow_redirects=settings.FOLLOW_REDIRECTS,
            transport=transport,
        )

    async def fetch(self, url: str) -> FetchResult:
        """
        GET the target URL and read the whole body as text.

        The URL is not validated; malformed URLs and unsupported schemes
        come back as FetchFailure like any other error.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=self.follow_redirects,
                transport=self.transport,
            ) as client:
                response = await client.get(url)
                body = response.text
        except Exception as e:
            message = str(e)
            logger.warning(
                f"Upstream fetch failed: {type(e).__name__}: {message}",
                extra={"target_url": url, "error_type": type(e).__name__},
            )
            return FetchFailure(message=message, error_type=type(e).__name__)

        logger.debug(
            "Upstream fetch completed",
            extra={"target_url": url, "status_code": response.status_code},
        )
        return FetchSuccess(
            status_code=response.status_code,
            content_type=_raw_content_type(response),
            body=body,
            encoding=response.encoding or "utf-8",
        )
