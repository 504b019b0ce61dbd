from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .settings import Settings

DEFAULT_METHODS = ["GET", "OPTIONS"]
DEFAULT_HEADERS = ["Authorization", "Content-Type"]


def add_cors(app: FastAPI, settings: Settings) -> None:
    allowed_origins = settings.cors_origin_list()
    origin_regex = (settings.CORS_ALLOW_ORIGIN_REGEX or "").strip()
    if not allowed_origins and not origin_regex:
        # Echo the request Origin back instead of a bare "*"
        origin_regex = r"https?://.*"

    if origin_regex:
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=origin_regex,
            allow_methods=DEFAULT_METHODS,
            allow_headers=DEFAULT_HEADERS,
            allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
            max_age=600,
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_methods=DEFAULT_METHODS,
            allow_headers=DEFAULT_HEADERS,
            allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
            max_age=600,
        )
