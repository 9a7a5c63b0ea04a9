# backend/inkmatch/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import api_artist, api_likes, api_tattoo
from .core.config import settings
from .core.observability import setup_logging
from .database import engine
from .models.base import BaseModel
from .store import close_store
from .utils.errors import InkMatchError, error_response

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DOCUMENT_STORE == "sql":
        BaseModel.metadata.create_all(bind=engine)
    logger.info("InkMatch API starting with %s document store", settings.DOCUMENT_STORE)
    yield
    await close_store()


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

api_prefix = settings.API_V1_STR
app.include_router(api_likes.router, prefix=api_prefix)
app.include_router(api_artist.router, prefix=api_prefix)
app.include_router(api_tattoo.router, prefix=api_prefix)


@app.exception_handler(InkMatchError)
async def inkmatch_exception_handler(request: Request, exc: InkMatchError):
    """Translate domain failures into the shared error body."""
    http_exc = error_response(exc.message, exc.field_errors, exc.status_code)
    return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return validation errors with details and log them for debugging."""
    errors = exc.errors()
    logger.warning("Validation error at %s: %s", request.url.path, errors)
    field_errors = {
        ".".join(str(p) for p in err.get("loc", ()) if p != "body"): err.get("msg", "invalid")
        for err in errors
    }
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": {"message": "Invalid request", "field_errors": field_errors}},
    )


@app.get("/healthz")
async def healthz() -> dict:
    return {"status": "ok", "store": settings.DOCUMENT_STORE}
