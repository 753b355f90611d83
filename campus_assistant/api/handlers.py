"""
API handlers: validate request data, call services, map results/errors to HTTP.

Responsibility: Bridge HTTP types and services. Marshalling and exception-to-HTTP mapping.
Lives in the API layer so services stay free of FastAPI/HTTP types.
"""

import logging

from fastapi import HTTPException, Request

from campus_assistant.agent.llm import AugmentationDelegate
from campus_assistant.core.campus_db import CampusStore
from campus_assistant.core.errors import InvalidQueryError
from campus_assistant.schemas.query import (
    FacilityCreateRequest,
    FacilityCreateResponse,
    QueryRequest,
    QueryResponse,
    SearchResponse,
)
from campus_assistant.services.response_composer import compose_reply
from campus_assistant.services.search_service import search_campus

logger = logging.getLogger(__name__)


def get_store(request: Request) -> CampusStore:
    """Store created at startup (see main.lifespan)."""
    return request.app.state.store


def get_delegate(request: Request) -> AugmentationDelegate | None:
    """Configured augmentation delegate, or None when no LLM key is set."""
    return getattr(request.app.state, "delegate", None)


def _require_text(value: str | None, field: str, allow_blank: bool = False) -> str:
    """Reject None and ""; whitespace-only too unless allow_blank is set."""
    if not value or (not allow_blank and not value.strip()):
        logger.info("[api:validate] rejected %s=%r", field, value)
        raise InvalidQueryError(f"{field} required")
    return value


def handle_query(
    body: QueryRequest,
    store: CampusStore,
    delegate: AugmentationDelegate | None,
) -> QueryResponse:
    """Validate the message (400 before touching the store), search, compose."""
    try:
        message = _require_text(body.message, "message", allow_blank=True)
    except InvalidQueryError as e:
        raise HTTPException(status_code=400, detail=e.message) from e

    hits = search_campus(store, message)
    composed = compose_reply(message, hits, body.use_llm, delegate)
    return QueryResponse(reply=composed.reply, hits=composed.hits)


def handle_search(q: str, store: CampusStore) -> SearchResponse:
    return SearchResponse(hits=search_campus(store, q))


def handle_add_facility(body: FacilityCreateRequest, store: CampusStore) -> FacilityCreateResponse:
    """Insert a facility row; 400 if name is missing."""
    try:
        name = _require_text(body.name, "name")
    except InvalidQueryError as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    new_id = store.insert_facility(
        name=name,
        type=body.type,
        location=body.location,
        hours=body.hours,
        details=body.details,
    )
    return FacilityCreateResponse(ok=True, id=new_id)
