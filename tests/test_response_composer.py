"""
Unit tests for compose_reply: summary format, templates, delegate success/failure.
"""

from unittest.mock import MagicMock

import pytest

from campus_assistant.agent.llm import DelegateFailure, DelegateSuccess
from campus_assistant.core.campus_db import CampusStore
from campus_assistant.schemas.records import CampusHits, FacilityEntry, LibraryEntry
from campus_assistant.services.response_composer import (
    NO_RECORDS_SUMMARY,
    build_context_summary,
    build_prompt,
    compose_reply,
)
from campus_assistant.services.search_service import search_campus


def _delegate(result):
    delegate = MagicMock()
    delegate.name = "fake"
    delegate.generate.return_value = result
    return delegate


@pytest.fixture
def gym_hits() -> CampusHits:
    return CampusHits(
        facilities=[
            FacilityEntry(
                id=2,
                name="Gym",
                type="Recreation",
                location="Sports Complex",
                hours="05:00-23:00",
                details="Free for students",
            )
        ]
    )


class TestContextSummary:
    def test_no_hits_gives_sentinel(self) -> None:
        assert build_context_summary(CampusHits()) == "No matching campus records."

    def test_fragment_is_upper_label_and_compact_json(self, gym_hits: CampusHits) -> None:
        assert build_context_summary(gym_hits) == (
            'FACILITIES: {"id":2,"name":"Gym","type":"Recreation","location":"Sports Complex",'
            '"hours":"05:00-23:00","details":"Free for students"}'
        )

    def test_at_most_three_records_per_collection(self) -> None:
        books = [LibraryEntry(id=i, title=f"Book {i}") for i in range(1, 6)]
        summary = build_context_summary(CampusHits(library=books))
        assert summary.count('"title"') == 3
        assert "Book 3" in summary and "Book 4" not in summary
        assert summary.count("; ") == 2

    def test_collections_joined_by_newline(self, store: CampusStore) -> None:
        summary = build_context_summary(search_campus(store, "campus"))
        lines = summary.split("\n")
        assert [line.split(":")[0] for line in lines] == ["DINING", "ADMIN"]


class TestTemplateReplies:
    def test_hits_without_llm(self, gym_hits: CampusHits) -> None:
        out = compose_reply("gym", gym_hits, use_llm=False, delegate=None)
        assert out.reply == "I found some items: \n" + build_context_summary(gym_hits)
        assert "FACILITIES" in out.reply
        assert out.hits is gym_hits

    def test_no_hits_without_llm(self) -> None:
        out = compose_reply("zzz999", CampusHits(), use_llm=False, delegate=None)
        assert out.reply == (
            'I couldn\'t find matching campus records for "zzz999". '
            "Try different keywords or ask the Registrar."
        )

    def test_llm_requested_but_not_configured_uses_template(self, gym_hits: CampusHits) -> None:
        out = compose_reply("gym", gym_hits, use_llm=True, delegate=None)
        assert out.reply.startswith("I found some items: \n")

    def test_delegate_not_called_when_llm_not_requested(self, gym_hits: CampusHits) -> None:
        delegate = _delegate(DelegateSuccess("should not be used"))
        first = compose_reply("gym", gym_hits, use_llm=False, delegate=delegate)
        second = compose_reply("gym", gym_hits, use_llm=False, delegate=delegate)
        assert delegate.generate.call_count == 0
        assert first.reply == second.reply


class TestDelegate:
    def test_success_text_is_returned_verbatim(self, gym_hits: CampusHits) -> None:
        delegate = _delegate(DelegateSuccess("  The gym is open 05:00-23:00.  "))
        out = compose_reply("gym", gym_hits, use_llm=True, delegate=delegate)
        assert out.reply == "  The gym is open 05:00-23:00.  "
        assert out.hits is gym_hits
        delegate.generate.assert_called_once_with(build_prompt("gym", build_context_summary(gym_hits)))

    def test_prompt_embeds_query_and_summary(self, gym_hits: CampusHits) -> None:
        prompt = build_prompt("where is the gym", build_context_summary(gym_hits))
        assert 'The user asked: "where is the gym"' in prompt
        assert "FACILITIES:" in prompt

    def test_failure_falls_back_to_found_records(self, gym_hits: CampusHits) -> None:
        delegate = _delegate(DelegateFailure("timeout", "read timed out"))
        out = compose_reply("gym", gym_hits, use_llm=True, delegate=delegate)
        assert out.reply == "Found records. " + build_context_summary(gym_hits)
        assert delegate.generate.call_count == 1

    def test_failure_with_no_hits_still_says_found_records(self) -> None:
        delegate = _delegate(DelegateFailure("transport", "connection refused"))
        out = compose_reply("zzz999", CampusHits(), use_llm=True, delegate=delegate)
        assert out.reply == "Found records. " + NO_RECORDS_SUMMARY
        assert "couldn't find" not in out.reply

    def test_empty_success_text_uses_fallback(self) -> None:
        out = compose_reply("x", CampusHits(), use_llm=True, delegate=_delegate(DelegateSuccess("")))
        assert out.reply == "Found records. No matching campus records."


@pytest.mark.parametrize("use_llm", [False, True])
@pytest.mark.parametrize(
    "delegate_result",
    [None, DelegateSuccess("ok"), DelegateFailure("malformed")],
)
@pytest.mark.parametrize("query", ["gym", "zzz999", ""])
def test_reply_is_never_empty(store: CampusStore, use_llm, delegate_result, query) -> None:
    delegate = _delegate(delegate_result) if delegate_result is not None else None
    out = compose_reply(query, search_campus(store, query), use_llm=use_llm, delegate=delegate)
    assert out.reply.strip()
