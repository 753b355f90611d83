"""
Response composer: turn search hits into the reply shown to the user.

Responsibility: Build a short per-collection summary of the hits, then either
fill the fixed reply template or hand the summary to the augmentation delegate.
A failed delegate call degrades to the "Found records." fallback; it is never
raised to the caller.
"""

import json
import logging
from dataclasses import dataclass

from campus_assistant.agent.llm import AugmentationDelegate, DelegateFailure, DelegateSuccess
from campus_assistant.core.config import SUMMARY_MAX_RECORDS
from campus_assistant.schemas.records import CampusHits

logger = logging.getLogger(__name__)

NO_RECORDS_SUMMARY = "No matching campus records."


@dataclass
class ComposedReply:
    reply: str
    hits: CampusHits


def build_context_summary(hits: CampusHits, max_records: int = SUMMARY_MAX_RECORDS) -> str:
    """One line per collection with hits: 'NAME: {json}; {json}' for the first max_records rows."""
    parts = []
    for name, records in hits.by_collection():
        if not records:
            continue
        serialized = "; ".join(
            json.dumps(r.model_dump(), separators=(",", ":"), ensure_ascii=False)
            for r in records[:max_records]
        )
        parts.append(f"{name.upper()}: {serialized}")
    return "\n".join(parts) if parts else NO_RECORDS_SUMMARY


def build_prompt(query: str, context_summary: str) -> str:
    return (
        f'You are a helpful campus assistant. The user asked: "{query}". '
        f"Here are campus records found:\n{context_summary}\n"
        "Please answer concisely, mention whether records were found, "
        "and provide next steps or contact info."
    )


def template_reply(query: str, hits: CampusHits, context_summary: str) -> str:
    if hits.total():
        return f"I found some items: \n{context_summary}"
    return (
        f'I couldn\'t find matching campus records for "{query}". '
        "Try different keywords or ask the Registrar."
    )


def compose_reply(
    query: str,
    hits: CampusHits,
    use_llm: bool,
    delegate: AugmentationDelegate | None,
) -> ComposedReply:
    """
    Build the reply for query from hits.

    Without use_llm or without a delegate the reply is the fixed template. With
    both, the delegate is called once; its text is returned verbatim, and on
    failure the reply is "Found records. " + summary, whether or not anything
    matched. hits is passed through unchanged.
    """
    context_summary = build_context_summary(hits)
    logger.info(
        "[composer:compose_reply] IN  query=%r use_llm=%s delegate=%s total_hits=%d",
        query, use_llm, getattr(delegate, "name", None), hits.total(),
    )
    if not use_llm or delegate is None:
        return ComposedReply(reply=template_reply(query, hits, context_summary), hits=hits)

    result = delegate.generate(build_prompt(query, context_summary))
    if isinstance(result, DelegateSuccess) and result.text:
        reply = result.text
    else:
        if isinstance(result, DelegateFailure):
            logger.warning("[composer:compose_reply] delegate failed kind=%s; using fallback", result.kind)
        reply = f"Found records. {context_summary}"
    logger.info("[composer:compose_reply] OUT reply_len=%d", len(reply))
    return ComposedReply(reply=reply, hits=hits)
