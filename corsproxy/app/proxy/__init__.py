"""
Proxy Package
=============

This package implements the CORS forwarding endpoint.

Main Components:
----------------
- routes.py: FastAPI router with the /proxy endpoint
- fetcher.py: Outbound GET returning an explicit success/failure result
- replies.py: Immutable reply construction, CORS headers and rendering

Usage:
------
    from corsproxy.app.proxy import proxy_router, UpstreamFetcher
    app.state.fetcher = UpstreamFetcher()
    app.include_router(proxy_router)
"""

from .fetcher import UpstreamFetcher
from .routes import proxy_router

__all__ = ["proxy_router", "UpstreamFetcher"]
