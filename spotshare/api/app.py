"""FastAPI app, CORS, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s: %(message)s",
)

from spotshare.api.state import AppState, get_state
from spotshare.config import ensure_data_dir

# Import routes after state to avoid circular imports
from spotshare.api.routes import channels, commands, settings, spotify

__all__ = ["app", "AppState", "get_state"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_data_dir()
    logging.getLogger(__name__).info(
        "Share commands ready: %s",
        ", ".join("/" + c.name for c in get_state().dispatcher.list_commands()),
    )
    yield


app = FastAPI(
    title="SpotShare API",
    description="Slash commands that share your current Spotify track, album or artist",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(commands.router, prefix="/api/commands", tags=["commands"])
app.include_router(settings.router, prefix="/api/settings", tags=["settings"])
app.include_router(channels.router, prefix="/api/channels", tags=["channels"])
app.include_router(spotify.router, prefix="/api/spotify", tags=["spotify"])
