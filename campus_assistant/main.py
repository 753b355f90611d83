# Run from project root: uvicorn campus_assistant.main:app --reload --port 4000
# or: python -m campus_assistant.main (uses HOST/PORT from env, default port 4000)

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campus_assistant.agent.llm import build_delegate
from campus_assistant.api.routes import router
from campus_assistant.core.campus_db import CampusStore
from campus_assistant.core.config import CAMPUS_DB_PATH, HOST, PORT, SEED_ON_START

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(db_path: Path | str | None = None, seed: bool = SEED_ON_START) -> FastAPI:
    """
    Build the API app. The campus store is opened (and seeded when empty) at
    startup; StoreUnavailableError aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = CampusStore(db_path or CAMPUS_DB_PATH)
        store.init(seed=seed)
        app.state.store = store
        app.state.delegate = build_delegate()
        logger.info("Smart Campus Assistant ready (db=%s)", store.db_path)
        yield

    app = FastAPI(title="Smart Campus Assistant", lifespan=lifespan)
    # Chat UI is served from a different origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
