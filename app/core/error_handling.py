from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
import traceback
from app.utils.logging_utils import log_debug

def register_exception_handlers(app: FastAPI):
    """Render every failure as ``{"error": ...}`` so clients see one error shape."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        if exc.status_code >= 500:
            log_debug(f"{request.method} {request.url.path} failed: {exc.detail}", service="errors")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        log_debug(f"Unhandled error on {request.method} {request.url.path}", traceback.format_exc(), service="errors")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "detail": str(exc)}
        )
