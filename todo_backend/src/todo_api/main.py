from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .filters import ValidationProblem, request_validation_handler, validation_problem_handler
from .logging_config import setup_logging
from .middleware import LegacyRedirectMiddleware, RequestLoggerMiddleware
from .routers import todos as todos_router
from .settings import Settings, get_settings

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "todos", "description": "CRUD operations over the in-memory todo list."},
]


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Middleware runs outermost first: CORS, legacy redirects, request logging, then routing.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_format, settings.log_level)

    application = FastAPI(
        title="Todo API",
        description="In-memory todo service with creation-time validation.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )

    # Starlette wraps later additions around earlier ones.
    application.add_middleware(RequestLoggerMiddleware)
    application.add_middleware(LegacyRedirectMiddleware)

    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )

    application.add_exception_handler(ValidationProblem, validation_problem_handler)
    application.add_exception_handler(RequestValidationError, request_validation_handler)

    @application.get("/", summary="Health Check", tags=["health"])
    def health_check():
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health.
        """
        return {"message": "Healthy"}

    application.include_router(todos_router.router)
    return application


app = create_app()


# PUBLIC_INTERFACE
def run() -> None:
    """Serve the application with uvicorn on HOST:PORT."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
