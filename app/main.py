"""FastAPI application entrypoint. No business logic; only wiring, middleware and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.errors import AppError, AuthError, StoreError
from app.schemas.health import GreetingResponse

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Owner API",
    version="1.0.0",
    docs_url="/api-docs",
    redoc_url=None,
    openapi_url="/api-docs/swagger.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    """Map domain errors to {"message": ...}; store failures get a generic message."""
    if isinstance(exc, StoreError):
        logger.error(
            "Store failure on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc.__cause__ or exc,
        )
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})
    if isinstance(exc, AuthError):
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message, "code": exc.code},
            headers=headers,
        )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Body/query validation failures are client errors (400), one entry per bad field."""
    errors = [
        {
            "msg": err.get("msg", "Invalid value"),
            "param": ".".join(str(p) for p in err.get("loc", ())[1:]),
            "location": str(err.get("loc", ("body",))[0]),
        }
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"errors": errors})


app.include_router(v1_router, prefix=settings.API_PREFIX)


@app.get("/hello", response_model=GreetingResponse, tags=["health"])
def hello() -> GreetingResponse:
    """Greeting used to smoke-test the deployment."""
    return GreetingResponse(message="Hello, API Testing!")
