"""
List/search and add-term view tests
"""

from datetime import datetime
from typing import List, Optional

import pytest

from jargon_buster.client.errors import ExplainRequestError
from jargon_buster.client.term_store import TermStore
from jargon_buster.client.term_view import (
    AddTermForm,
    TermListView,
    filter_terms,
    format_date,
    matches_query,
    search_links,
)
from jargon_buster.schemas.term import TermResponse


class FakeExplainer:
    def __init__(self, answer: Optional[str] = "A short explanation.", error: Optional[str] = None):
        self.answer = answer
        self.error = error
        self.terms: List[str] = []

    async def explain(self, term: str) -> Optional[str]:
        self.terms.append(term)
        if self.error is not None:
            raise ExplainRequestError(self.error, status_code=500)
        return self.answer


def _term(**fields) -> TermResponse:
    return TermResponse(id=fields.pop("id", "t1"), term=fields.pop("term", "Latency"), **fields)


async def _view(repo, explainer=None) -> TermListView:
    store = TermStore(repo)
    await store.set_user("user-1")
    return TermListView(store, explainer or FakeExplainer())


# ============ Search ============

@pytest.mark.parametrize(
    "query, fields",
    [
        ("LAT", {}),
        ("delay", {"definition": "Network DELAY"}),
        ("tcp", {"notes": "seen in TCP docs"}),
        ("waiting", {"eli5": "How long you are Waiting"}),
    ],
)
def test_query_matches_any_field_case_insensitively(query, fields):
    assert matches_query(_term(**fields), query)


def test_query_misses_when_no_field_contains_it():
    term = _term(definition="delay", notes=None, eli5=None)
    assert not matches_query(term, "throughput")


def test_empty_query_returns_filtered_set_unchanged():
    terms = [_term(id="a", understood=False), _term(id="b", understood=False), _term(id="c", understood=True)]
    assert filter_terms(terms, False, "") == terms[:2]
    assert filter_terms(terms, True) == terms[2:]


def test_search_links_are_encoded():
    links = search_links("C++ & Rust")
    assert links["google"] == "https://www.google.com/search?q=C%2B%2B%20%26%20Rust"
    assert links["wikipedia"] == "https://en.wikipedia.org/w/index.php?search=C%2B%2B%20%26%20Rust"


def test_format_date():
    assert format_date(datetime(2026, 10, 9, 15, 30)) == "Oct 9, 2026"
    assert format_date("2024-01-31T08:00:00+00:00") == "Jan 31, 2024"
    assert format_date(None) == ""


# ============ List view ============

@pytest.mark.asyncio
async def test_filter_and_empty_messages(fake_repo):
    fake_repo.seed("latency")
    view = await _view(fake_repo)

    assert [t.term for t in view.visible_terms] == ["latency"]
    assert view.empty_message is None

    view.set_filter("understood")
    assert view.visible_terms == []
    assert view.empty_message == "No understood terms yet."

    view.set_filter("notUnderstood")
    view.search_query = "zzz"
    assert view.empty_message == "No terms match your search."

    with pytest.raises(ValueError):
        view.set_filter("everything")


@pytest.mark.asyncio
async def test_empty_list_message(fake_repo):
    view = await _view(fake_repo)
    assert view.empty_message == "No terms to learn yet. Add one above!"


@pytest.mark.asyncio
async def test_edit_prefills_and_saves(fake_repo):
    row = fake_repo.seed("latency", notes=None)
    view = await _view(fake_repo)

    form = view.start_editing(row.id)
    assert (form.term, form.definition, form.notes, form.eli5) == ("latency", "", "", "")

    form.definition = "  delay "
    assert await view.save_edit() is True
    assert view.editing is None

    saved = view.store.get(row.id)
    assert saved.definition == "delay"
    assert saved.term == "latency"
    assert saved.understood is False


@pytest.mark.asyncio
async def test_edit_with_empty_term_stays_open(fake_repo):
    row = fake_repo.seed("latency")
    view = await _view(fake_repo)

    view.start_editing(row.id)
    view.editing.term = "   "
    assert await view.save_edit() is False
    assert view.editing is not None
    assert "update" not in fake_repo.calls


@pytest.mark.asyncio
async def test_cancel_edit_discards(fake_repo):
    row = fake_repo.seed("latency")
    view = await _view(fake_repo)

    view.start_editing(row.id)
    view.editing.definition = "changed"
    view.cancel_edit()

    assert view.editing is None
    assert view.store.get(row.id).definition == ""
    assert "update" not in fake_repo.calls


# ============ Explanation panel ============

@pytest.mark.asyncio
async def test_explain_shows_text(fake_repo):
    row = fake_repo.seed("latency")
    explainer = FakeExplainer("Latency is delay.")
    view = await _view(fake_repo, explainer)

    await view.explain(row.id)
    assert explainer.terms == ["latency"]
    assert view.explaining_term_id == row.id
    assert view.is_explaining is False
    assert view.explanation == "Latency is delay."
    assert view.explanation_error is None

    view.close_explanation()
    assert view.explaining_term_id is None
    assert view.explanation == ""


@pytest.mark.asyncio
async def test_explain_shows_error(fake_repo):
    row = fake_repo.seed("latency")
    view = await _view(fake_repo, FakeExplainer(error="Failed to get explanation from AI service. Status: 500"))

    await view.explain(row.id)
    assert view.explanation == ""
    assert view.explanation_error == (
        "Failed to get explanation: Failed to get explanation from AI service. Status: 500"
    )


@pytest.mark.asyncio
async def test_explain_without_text_is_unexpected(fake_repo):
    row = fake_repo.seed("latency")
    view = await _view(fake_repo, FakeExplainer(answer=None))

    await view.explain(row.id)
    assert view.explanation_error == "Received unexpected response from the explanation service."


@pytest.mark.asyncio
async def test_only_one_panel_open(fake_repo):
    a = fake_repo.seed("alpha")
    b = fake_repo.seed("beta")
    view = await _view(fake_repo)

    await view.explain(a.id)
    await view.explain(b.id)
    assert view.explaining_term_id == b.id


# ============ Add form ============

@pytest.mark.asyncio
async def test_add_form_submits_trimmed_values(fake_repo):
    store = TermStore(fake_repo)
    await store.set_user("user-1")
    form = AddTermForm(store, term="  latency ", definition="", initial_thoughts=" slow? ")

    assert await form.submit() is True
    assert form.term == ""
    assert store.terms[0].term == "latency"
    assert store.terms[0].initial_thoughts == "slow?"


@pytest.mark.asyncio
async def test_add_form_rejects_empty_term(fake_repo):
    store = TermStore(fake_repo)
    await store.set_user("user-1")
    form = AddTermForm(store, term="   ", definition="orphan definition")

    assert await form.submit() is False
    assert form.definition == "orphan definition"
    assert "insert" not in fake_repo.calls


@pytest.mark.asyncio
async def test_add_form_with_overlong_term_leaves_store_alone(fake_repo):
    store = TermStore(fake_repo)
    await store.set_user("user-1")
    form = AddTermForm(store, term="x" * 256)

    await form.submit()
    assert "insert" not in fake_repo.calls
    assert store.terms == []
    assert store.loading is False


@pytest.mark.asyncio
async def test_edit_with_overlong_term_keeps_cached_row(fake_repo):
    row = fake_repo.seed("latency")
    view = await _view(fake_repo)

    view.start_editing(row.id)
    view.editing.term = "x" * 256
    await view.save_edit()
    assert "update" not in fake_repo.calls
    assert view.store.get(row.id) == row
