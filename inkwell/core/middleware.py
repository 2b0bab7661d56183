"""Middleware configuration for the FastAPI application.

CORS and rate limiting. The limiter itself lives on ``app.state.limiter``.
"""

from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware


def configure_middleware(app: FastAPI, allowed_origins: List[str], cors_max_age: int = 3600) -> None:
    """Configure all middleware for the FastAPI application.

    Args:
        app (FastAPI): The FastAPI application instance
        allowed_origins: Origins allowed to call the API from a browser
        cors_max_age: Seconds a browser may cache a preflight response
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
        max_age=cors_max_age,
    )

    app.add_middleware(SlowAPIMiddleware)
