"""
Cross-origin headers applied to every response
"""
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

ALLOWED_ORIGIN = "*"
ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]
ALLOWED_HEADERS = ["Origin", "X-Requested-With", "Content-Type", "Accept"]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": ALLOWED_ORIGIN,
    "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
    "Access-Control-Allow-Headers": ", ".join(ALLOWED_HEADERS),
}


def apply_cors_headers(response):
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Allow any origin, whether or not the request carries an Origin header"""
    
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        return apply_cors_headers(response)
