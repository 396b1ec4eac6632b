import logging

import uvicorn
from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

# --- Configuration ---
from carwash.config import get_settings

# --- Data store ---
from carwash.database import engine, Base
from carwash import database_models  # noqa: F401  (registers the tables on Base)
from carwash.auth_utils import create_default_services_if_missing

# --- Routers ---
from carwash.routers import auth
from carwash.routers.home import router as home_router
from carwash.routers.dashboard import router as dashboard_router
from carwash.routers.booking import router as booking_router
from carwash.routers.vehicles import router as vehicles_router

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=settings.LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)
Base.metadata.create_all(bind=engine)
if settings.SEED_SERVICES:
    create_default_services_if_missing()

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET,
    https_only=settings.HTTPS_ONLY
)

app.include_router(home_router)
app.include_router(auth.router)
app.include_router(dashboard_router)
app.include_router(booking_router)
app.include_router(vehicles_router)


@app.get("/status")
def status(request: Request):
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "path": request.url.path,
    }


if __name__ == "__main__":
    logger.info("Starting %s on %s:%s", settings.APP_NAME, settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
