"""
Learning FastAPI: one application, one router per chapter.

Chapters:
- first steps, path parameters, query parameters, request body
- query and path/numeric validation
- multiple body parameters, body fields, nested models
- cookies and headers
- persistence (SQLAlchemy) and the OAuth2 password flow (passlib + python-jose)

Run with `uvicorn main:app --reload` and open /docs.
"""
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import settings
from database import Base, engine
from logging_setup import configure_logging, get_request_logger, logger
from routes import (
    auth,
    body_fields,
    body_multiple,
    cookies,
    first_steps,
    headers,
    items,
    nested_models,
    path_params,
    path_validation,
    query_params,
    query_validation,
    request_body,
)

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info("application startup complete", extra={"request_id": "startup"})
    yield
    logger.info("application shutdown", extra={"request_id": "shutdown"})


app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request logging middleware
@app.middleware("http")
async def add_logging_and_request_id(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    adapter = get_request_logger(request_id)
    start = time.time()
    adapter.info(f"start {request.method} {request.url.path}")
    try:
        response = await call_next(request)
    except Exception:
        adapter.exception("unhandled exception during request")
        raise
    duration = time.time() - start
    adapter.info(f"end {request.method} {request.url.path} status={response.status_code} duration={duration:.3f}s")
    response.headers["X-Request-ID"] = request_id
    return response


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


# Exception handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    get_request_logger(_request_id(request)).warning(f"HTTPException {exc.status_code}: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = jsonable_encoder(exc.errors())
    get_request_logger(_request_id(request)).info(f"validation failed on {request.url.path}: {len(errors)} error(s)")
    return JSONResponse(status_code=422, content={"detail": errors})


# Register Routers
app.include_router(first_steps.router)
app.include_router(path_params.router)
app.include_router(query_params.router)
app.include_router(request_body.router)
app.include_router(query_validation.router)
app.include_router(path_validation.router)
app.include_router(body_multiple.router)
app.include_router(body_fields.router)
app.include_router(nested_models.router)
app.include_router(cookies.router)
app.include_router(headers.router)
app.include_router(auth.router)
app.include_router(items.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
