# app/main.py
import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .bookings import router as bookings_router
from .catalog import router as catalog_router
from .clients import router as clients_router
from .errors import ServiceError
from .payments import router as payments_router
from .videos import router as videos_router

config.configure_logging()
log = logging.getLogger(__name__)

app = FastAPI(title="Reelhouse API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _fail(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message, **extra})


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    if exc.status_code >= 500:
        log.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return _fail(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ())[1:]) or 'body'}: {err.get('msg')}"
        for err in exc.errors()
    )
    return _fail(400, f"Invalid request: {problems}")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return _fail(404, "Endpoint not found")
    return _fail(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    log.exception(f"Unhandled error on {request.method} {request.url.path}")
    extra = {"error": str(exc)} if config.APP_ENV == "development" else {}
    return _fail(500, "Something went wrong", **extra)


@app.get("/api/health", tags=["health"])
async def health():
    return {
        "status": "OK",
        "service": config.SERVICE_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# routers
app.include_router(bookings_router)
app.include_router(clients_router)
app.include_router(videos_router)
app.include_router(catalog_router)
app.include_router(payments_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=config.PORT, reload=config.APP_ENV == "development")
