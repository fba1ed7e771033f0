"""
CORS Proxy Application Package

Fetches a caller-supplied URL server-side and relays the upstream status,
content type and body back to browser clients with permissive CORS headers.

Modules:
- main: FastAPI application factory and standalone server entry point
- config: Environment-driven settings
- models: Fetch result and reply models
- proxy: Forwarding endpoint, outbound fetcher and reply construction
- serverless: AWS Lambda handler wrapping the same application
"""
