"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api import router
from .cors import add_cors
from .errors import CurrencyError, ServiceUnavailableError
from .settings import get_settings, settings

logger = logging.getLogger(settings.APP_NAME)


app = FastAPI(title=settings.APP_NAME, version=settings.VERSION)
add_cors(app, settings)
app.include_router(router)


@app.on_event("startup")
async def startup() -> None:
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))


@app.exception_handler(CurrencyError)
async def currency_error_handler(request: Request, exc: CurrencyError):
    status_code = exc.status_code
    if isinstance(exc, ServiceUnavailableError):
        status_code = get_settings().PROVIDER_ERROR_STATUS
    logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return JSONResponse(status_code=status_code, content={"error": exc.message})


@app.get("/")
async def root() -> dict:
    return {"data": f"Welcome {settings.APP_NAME}", "version": settings.VERSION}


@app.get("/health")
async def health() -> dict:
    return {"ok": True, "data": {"status": "healthy"}, "ts": datetime.now(timezone.utc).isoformat()}


__all__ = ["app"]


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
    )
