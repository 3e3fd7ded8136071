# src/main.py
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from auth.routes import router as auth_router
from auth.services import get_identity_provider
from progress.routes import router as progress_router
from moderation.routes import router as moderation_router
from admin.routes import router as admin_router
from config import settings

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Learning Community Backend",
    description="API for learner progress, community moderation and admin analytics",
    version="0.1.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router)
app.include_router(progress_router)
app.include_router(moderation_router)
app.include_router(admin_router)


@app.on_event("startup")
async def startup_event():
    """Set up the identity provider so a missing key source fails at boot."""
    provider = get_identity_provider()
    logger.info(f"Verifying ID tokens with {'JWKS from ' + provider.jwks_url if provider.jwks_url else 'shared secret'}")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Render malformed query or body input as a one-line {"error": message}."""
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=422, content={"error": "Invalid request"})
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return JSONResponse(status_code=422, content={"error": f"Invalid {location}: {first.get('msg', 'invalid value')}"})


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    """Log store failures and answer with a terse 500."""
    logger.error(f"Store error on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Document store error"})


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Learning Community Backend is running"}


@app.get("/health")
async def health():
    """Liveness check."""
    return {"status": "healthy"}


if __name__ == "__main__":
    logger.info(f"API running at http://{settings.HOST}:{settings.PORT}")
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
