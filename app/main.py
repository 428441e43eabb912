"""
Main FastAPI application for the NBA Live Board API.
"""
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from prometheus_fastapi_instrumentator import Instrumentator

# Load environment variables from .env file
from dotenv import load_dotenv
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

from app.core.config import settings
from app.core.logging import configure_logging, get_logger
from app.core.middleware import CorrelationIdMiddleware
from app.api.routes import board

APP_DIR = Path(__file__).parent

configure_logging(
    level=settings.LOG_LEVEL,
    json_output=settings.LOG_JSON
)
logger = get_logger(__name__)

templates = Jinja2Templates(directory=str(APP_DIR / "templates"))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan events."""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    for name in settings.missing_credentials():
        logger.warning(f"{name} not set - provider disabled, board will render without it")

    yield

    logger.info("Shutting down application")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Live NBA games from API-Sports merged with moneylines from The Odds API",
    lifespan=lifespan
)

app.add_middleware(CorrelationIdMiddleware)

# Must run before any routes are added
instrumentator = Instrumentator()
instrumentator.instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(APP_DIR / "static")), name="static")

app.include_router(board.router)


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request):
    """Render the board page; it polls /api/board client-side."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"app_name": settings.APP_NAME},
    )


@app.get("/health")
async def health_check():
    """Health check with provider configuration status."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "providers": {
            "api_sports": "configured" if settings.APISPORTS_KEY else "disabled",
            "odds_api": "configured" if settings.ODDS_API_KEY else "disabled",
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
