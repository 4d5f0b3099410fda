"""
Hunting Camp Dashboard FastAPI Application

Main entry point for the camp dashboard, serving the REST API for stand
check-ins, the activity feed, admin roster management and the weather proxy.

Date: 2026-10-19
"""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load environment variables before logic.config reads them
load_dotenv()

from fastapi import FastAPI  # noqa: E402
from fastapi.staticfiles import StaticFiles  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from logic.config import LOG_LEVEL, PUBLIC_DIR  # noqa: E402
from server.activity import router as activity_router  # noqa: E402
from server.admin import router as admin_router  # noqa: E402
from server.deps import get_store  # noqa: E402
from server.hunters import router as hunters_router  # noqa: E402
from server.stands import router as stands_router  # noqa: E402
from server.weather import router as weather_router  # noqa: E402

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
_logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create empty collections for a fresh camp before serving requests."""
    store = app.dependency_overrides.get(get_store, get_store)()
    store.ensure_files()
    _logger.info("Camp data in %s", store.data_dir)
    yield


app = FastAPI(title="Hunting Camp Dashboard", lifespan=lifespan)

# The dashboard may be served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include all routers
app.include_router(stands_router)
app.include_router(hunters_router)
app.include_router(activity_router)
app.include_router(admin_router)
app.include_router(weather_router)

# ============================================================
# Static Files
# ============================================================

if os.path.isdir(PUBLIC_DIR):
    app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "3100")))
