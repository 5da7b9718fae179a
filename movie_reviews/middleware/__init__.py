"""
Middleware package for request processing
"""
from .cors import CORSHeadersMiddleware, CORS_HEADERS, apply_cors_headers

__all__ = [
    "CORSHeadersMiddleware",
    "CORS_HEADERS",
    "apply_cors_headers"
]
