"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster_api.config import settings
from roster_api.database import Base, SessionLocal, engine
from roster_api.errors import register_exception_handlers
from roster_api.middleware import SecurityHeadersMiddleware

# Import routers
from roster_api.routers import auth, rosters, system

# Import all models so Base.metadata knows about them
from roster_api.models.user import User        # noqa: F401
from roster_api.models.roster import Roster    # noqa: F401
from roster_api.services import user_service

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables (SQLite dev mode) then seed the admin account
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    with SessionLocal() as db:
        user_service.seed_admin(db, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
    logger.info("%s started (%s)", settings.SERVICE_NAME, settings.ENVIRONMENT)
    yield
    # Shutdown
    engine.dispose()
    logger.info("Shutting down %s", settings.SERVICE_NAME)


app = FastAPI(
    title=settings.SERVICE_NAME,
    description="Weekly care-shift roster: admins author the schedule, carers view today's shift",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Cookie"],
)
app.add_middleware(SecurityHeadersMiddleware)

register_exception_handlers(app)

# Register routers
app.include_router(system.router, tags=["System"])
app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(rosters.router, prefix="/api", tags=["Rosters"])
