import os
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import RedirectResponse

from core.config import settings

logger = logging.getLogger(__name__)

app = FastAPI(
    title="PackPal Backend API",
    description="API for the PackPal travel planner: trips, travel estimates and packing lists.",
    version="0.1.0",
)

# Configure CORS (Cross-Origin Resource Sharing)
# This allows the frontend dev servers to call the backend.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/", tags=["Root"])
def read_root():
    """Redirect to the frontend index.html"""
    return RedirectResponse(url="/frontend/index.html")

# Include the routers
from api.routers import auth, trips, packing, travel, weather, drafts

# Mount all routers with the /api prefix
app.include_router(auth.router, prefix="/api")
app.include_router(trips.router, prefix="/api")
app.include_router(packing.router, prefix="/api")
app.include_router(travel.router, prefix="/api")
app.include_router(weather.router, prefix="/api")
app.include_router(drafts.router, prefix="/api")

# Mount the built frontend if it sits next to the backend
frontend_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "frontend")
if os.path.exists(frontend_dir):
    app.mount("/frontend", StaticFiles(directory=frontend_dir), name="frontend")
    logger.info("Serving frontend from %s", frontend_dir)
