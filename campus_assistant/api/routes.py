"""
API route aggregator: register endpoints; no logic — only delegate to handlers.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from campus_assistant.agent.llm import AugmentationDelegate
from campus_assistant.api.handlers import (
    get_delegate,
    get_store,
    handle_add_facility,
    handle_query,
    handle_search,
)
from campus_assistant.core.campus_db import CampusStore
from campus_assistant.schemas.query import (
    FacilityCreateRequest,
    FacilityCreateResponse,
    QueryRequest,
    QueryResponse,
    SearchResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter()


# --- System ---

@router.get("/", tags=["system"])
def root():
    return {"status": "Smart Campus Assistant backend running"}


@router.get("/health", tags=["system"])
def health(
    store: CampusStore = Depends(get_store),
    delegate: AugmentationDelegate | None = Depends(get_delegate),
):
    store_ok = store.ping()
    return {"ok": store_ok, "store_ok": store_ok, "augmentation": getattr(delegate, "name", None)}


# --- Query ---

@router.post(
    "/api/query",
    response_model=QueryResponse,
    tags=["query"],
    summary="Ask the campus assistant",
    description="Search all campus collections for the message and return a reply plus the hits. "
    "Set useLLM to have the configured LLM phrase the reply. 400 if message is missing or empty.",
)
def post_query(
    body: QueryRequest,
    store: CampusStore = Depends(get_store),
    delegate: AugmentationDelegate | None = Depends(get_delegate),
) -> QueryResponse:
    logger.info("[api:post_query] IN  message=%r use_llm=%s", body.message, body.use_llm)
    try:
        response = handle_query(body, store, delegate)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Query failed")
        raise HTTPException(status_code=500, detail=str(e)) from e
    logger.info("[api:post_query] OUT reply_len=%d", len(response.reply))
    return response


@router.get(
    "/api/search",
    response_model=SearchResponse,
    tags=["query"],
    summary="Keyword search across campus collections",
    description="Case-insensitive substring search. Empty q matches every record.",
)
def get_search(q: str = "", store: CampusStore = Depends(get_store)) -> SearchResponse:
    logger.info("[api:get_search] IN  q=%r", q)
    return handle_search(q, store)


# --- Admin ---

@router.post(
    "/api/admin/facilities",
    response_model=FacilityCreateResponse,
    tags=["admin"],
    summary="Add a facility",
    description="Insert one facility row and return its generated id. 400 if name is missing.",
)
def post_facility(
    body: FacilityCreateRequest,
    store: CampusStore = Depends(get_store),
) -> FacilityCreateResponse:
    logger.info("[api:post_facility] IN  name=%r", body.name)
    return handle_add_facility(body, store)
