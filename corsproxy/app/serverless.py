"""
AWS Lambda entry point.

Wraps the same ASGI application in Mangum so the proxy can run behind API
Gateway or a Lambda function URL. There is no port to configure; the host
routes requests to `handler`.

Mangum runs with lifespan off, so logging is configured here at import time
instead of in the application lifespan.
"""

from mangum import Mangum

from corsproxy.app.config import get_settings
from corsproxy.app.main import app, setup_logging

setup_logging(get_settings().LOG_LEVEL)

handler = Mangum(app, lifespan="off")
