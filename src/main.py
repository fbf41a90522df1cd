"""
Skating Results Entry - FastAPI Application

Provides the REST API behind the result entry form: option lists for
skaters and events, and result submission.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.dependencies import get_db
from .api.routes import router
from .storage import DatabaseInterface, get_database, reset_database
from . import config

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    print("[*] Connecting to storage...")
    db = get_database()

    if await db.health_check():
        print("[+] Storage is reachable")
    else:
        logger.error("Storage health check failed; submissions will report errors")

    print(f"[*] Recording results for competition {config.COMPETITION_ID}")
    print("[*] App is ready.")

    yield

    print("[*] Shutting down...")
    reset_database()


app = FastAPI(
    title="Skating Results Entry",
    description="Record competitive skating results and award points",
    version="1.0.0",
    lifespan=lifespan
)

if config.CORS_ALLOW_ALL:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(router)


@app.get("/health")
async def health(db: DatabaseInterface = Depends(get_db)):
    """Health check endpoint."""
    healthy = await db.health_check()
    return {
        "status": "ok" if healthy else "degraded",
        "database": healthy,
        "competition_id": config.COMPETITION_ID,
    }


# Run with: uvicorn src.main:app --reload
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
