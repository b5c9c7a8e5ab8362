"""FastAPI application factory for the booking service."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from . import __version__, models  # noqa: F401  (registers tables on Base)
from .config import get_settings
from .database import Base, engine
from .exception_handlers import add_exception_handlers
from .logging_config import add_audit_middleware, configure_logging
from .rate_limit import apply_rate_limiter
from .routers import auth, bookings, settings as settings_router, users

settings = get_settings()


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.run_db_migrations:
        Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    configure_logging()
    fastapi_app = FastAPI(title="Observatory Booking Service", version=__version__, lifespan=lifespan)
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    apply_rate_limiter(fastapi_app)
    add_audit_middleware(fastapi_app, "observatory")
    add_exception_handlers(fastapi_app)
    Instrumentator().instrument(fastapi_app).expose(fastapi_app, include_in_schema=False)

    fastapi_app.include_router(auth.router)
    fastapi_app.include_router(bookings.router)
    fastapi_app.include_router(settings_router.router)
    fastapi_app.include_router(users.router)

    @fastapi_app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok", "service": "observatory"}

    return fastapi_app


app = create_app()
