from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import wraptext.config as config
from wraptext import __version__
from wraptext.config import Settings, load_config
from wraptext.routers import text

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info(
        f"wraptext {__version__} ready: default width {config.settings.defaults.width}, "
        f"{len(config.settings.presets)} preset(s)"
    )
    yield
    logger.info("wraptext shutting down")


app = FastAPI(
    title="wraptext",
    description="Wrap, fill and shorten text for fixed-width output.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include text router
app.include_router(text.router)


# --- CORE API ---


@app.get("/api/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "app": "wraptext",
        "version": __version__,
        "presets": sorted(config.settings.presets.keys()),
    }


@app.get("/api/settings", response_model=Settings)
async def get_settings():
    return config.settings


@app.post("/api/settings/reload")
async def reload_settings():
    """Re-read config.json, e.g. after editing presets by hand."""
    config.settings = load_config()
    logger.info(f"Settings reloaded: {len(config.settings.presets)} preset(s)")
    return {"message": "Settings reloaded", "presets": sorted(config.settings.presets.keys())}
