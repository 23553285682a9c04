import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.exceptions import AppError, ValidationError

logger = structlog.get_logger()


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.error("app_error", path=request.url.path, code=exc.code, error=exc.message)
    return JSONResponse(status_code=500, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": f"Invalid request body: {message}"})


async def catch_unhandled_errors(request: Request, call_next):
    """Turn uncaught exceptions into the error envelope inside the CORS layer."""
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("unhandled_error", path=request.url.path)
        message = str(exc) or "Unknown error"
        return JSONResponse(status_code=500, content={"error": message})


def register_exception_handlers(app):
    # Must run before CORSMiddleware is added so CORS wraps the 500 response
    app.middleware("http")(catch_unhandled_errors)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(AppError, app_error_handler)
