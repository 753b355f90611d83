"""Schemas for the query, search and admin endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from campus_assistant.schemas.records import CampusHits


class QueryRequest(BaseModel):
    """Request body for POST /api/query. Missing or empty message is rejected with 400 by the handler."""

    model_config = ConfigDict(populate_by_name=True)

    message: str | None = Field(None, description="Free-text campus question.")
    use_llm: bool = Field(False, alias="useLLM", description="Ask the LLM to phrase the reply, if configured.")


class QueryResponse(BaseModel):
    """Response for POST /api/query."""

    reply: str = Field(..., description="Templated summary or LLM reply. Never empty.")
    hits: CampusHits = Field(..., description="Matching records per collection.")


class SearchResponse(BaseModel):
    """Response for GET /api/search."""

    hits: CampusHits


class FacilityCreateRequest(BaseModel):
    """Request body for POST /api/admin/facilities."""

    name: str | None = Field(None, description="Facility name (required).")
    type: str | None = Field(None, description="Facility category, e.g. Recreation.")
    location: str | None = None
    hours: str | None = Field(None, description="Opening hours as text, e.g. 06:00-21:00.")
    details: str | None = None


class FacilityCreateResponse(BaseModel):
    """Response after inserting a facility."""

    ok: bool = True
    id: int = Field(..., description="Generated facility id.")

    model_config = {
        "json_schema_extra": {
            "examples": [{"ok": True, "id": 3}]
        }
    }
