import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlmodel import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from walk30.config import settings
from walk30.database import create_db_and_tables, engine
from walk30.errors import Walk30Error
from walk30.seed import seed_demo_data

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logging.Formatter.converter = time.gmtime
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup: Create database tables
    create_db_and_tables()
    if settings.seed_demo_data:
        try:
            with Session(engine) as db:
                seed_demo_data(db)
        except Exception:
            logger.exception("Error seeding database")
    logger.info("Application startup")
    yield
    logger.info("Application shutdown")


# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Log daily walks, keep your streak and compete with your team",
    version="1.0.0",
    lifespan=lifespan
)


@app.exception_handler(Walk30Error)
async def walk30_error_handler(request: Request, exc: Walk30Error):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    content = {"message": "Invalid request"}
    if errors:
        first = errors[0]
        content["message"] = first.get("msg", content["message"])
        location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query")]
        if location:
            content["field"] = ".".join(location)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"}
    )


# Include routers
from walk30.routers import activities, auth, leaderboard, teams  # noqa: E402

app.include_router(auth.router)
app.include_router(activities.router)
app.include_router(teams.router)
app.include_router(leaderboard.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
