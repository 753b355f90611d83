"""
Search: fan one query string out across every campus collection.

Responsibility: Run the store lookup once per collection with the raw query
text and package the rows as CampusHits. No HTTP here.
"""

import logging

from campus_assistant.core.campus_db import COLLECTIONS, CampusStore
from campus_assistant.schemas.records import CampusHits

logger = logging.getLogger(__name__)


def search_campus(store: CampusStore, query: str) -> CampusHits:
    """
    Look up query in all five collections. Empty query matches everything.
    Returns hits with every collection key present, rows in id order.
    """
    logger.info("[search:search_campus] IN  query=%r", query)
    rows = {name: store.find(name, query or "") for name in COLLECTIONS}
    hits = CampusHits(**rows)
    logger.info(
        "[search:search_campus] OUT %s",
        " ".join(f"{name}={len(records)}" for name, records in hits.by_collection()),
    )
    return hits
