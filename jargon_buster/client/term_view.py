"""
Term views

View-models for the add-term form and the filtered, searchable term list
with inline edit and the AI explanation panel. A UI renders their state and
forwards events to their methods.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Literal, Optional, Union
from urllib.parse import quote

from jargon_buster.client.errors import ClientError
from jargon_buster.client.explain_client import ExplainClient
from jargon_buster.client.term_store import TermStore
from jargon_buster.core.logging import get_logger
from jargon_buster.schemas.term import TermResponse

logger = get_logger(__name__)

TermFilter = Literal["understood", "notUnderstood"]

SEARCHABLE_FIELDS = ("term", "definition", "notes", "eli5")

UNEXPECTED_EXPLANATION = "Received unexpected response from the explanation service."


def matches_query(term: TermResponse, query: str) -> bool:
    """Case-insensitive substring match on any searchable field; empty query matches."""
    needle = (query or "").lower()
    if not needle:
        return True
    for field in SEARCHABLE_FIELDS:
        value = getattr(term, field)
        if value and needle in value.lower():
            return True
    return False


def filter_terms(terms: Iterable[TermResponse], understood: bool, query: str = "") -> List[TermResponse]:
    return [t for t in terms if t.understood == understood and matches_query(t, query)]


def search_links(term: str) -> dict[str, str]:
    encoded = quote(term, safe="!~*'()")
    return {
        "google": f"https://www.google.com/search?q={encoded}",
        "wikipedia": f"https://en.wikipedia.org/w/index.php?search={encoded}",
    }


def format_date(value: Union[datetime, str, None]) -> str:
    """Render as e.g. 'Oct 19, 2026'; blank for missing dates."""
    if value is None:
        return ""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return f"{value:%b} {value.day}, {value.year}"


@dataclass
class AddTermForm:
    store: TermStore
    term: str = ""
    definition: str = ""
    initial_thoughts: str = ""

    def reset(self) -> None:
        self.term = ""
        self.definition = ""
        self.initial_thoughts = ""

    async def submit(self) -> bool:
        """Hand the form to the store; an empty term never reaches it."""
        term = self.term.strip()
        if not term:
            return False
        await self.store.add(term, self.definition.strip(), self.initial_thoughts.strip())
        self.reset()
        return True


@dataclass
class TermEditForm:
    term_id: str
    term: str
    definition: str
    notes: str
    eli5: str

    @classmethod
    def from_term(cls, term: TermResponse) -> "TermEditForm":
        return cls(
            term_id=term.id,
            term=term.term,
            definition=term.definition or "",
            notes=term.notes or "",
            eli5=term.eli5 or "",
        )


class TermListView:
    def __init__(self, store: TermStore, explainer: ExplainClient):
        self.store = store
        self.explainer = explainer

        self.filter: TermFilter = "notUnderstood"
        self.search_query = ""

        self.editing: Optional[TermEditForm] = None

        self.explaining_term_id: Optional[str] = None
        self.explanation = ""
        self.is_explaining = False
        self.explanation_error: Optional[str] = None

    # -------------
    # Listing
    # -------------
    def set_filter(self, value: TermFilter) -> None:
        if value not in ("understood", "notUnderstood"):
            raise ValueError(f"Unknown filter: {value}")
        self.filter = value

    @property
    def visible_terms(self) -> List[TermResponse]:
        return filter_terms(self.store.terms, self.filter == "understood", self.search_query)

    @property
    def empty_message(self) -> Optional[str]:
        if self.visible_terms:
            return None
        if self.search_query:
            return "No terms match your search."
        if self.filter == "understood":
            return "No understood terms yet."
        return "No terms to learn yet. Add one above!"

    # -------------
    # Inline edit
    # -------------
    def start_editing(self, term_id: str) -> Optional[TermEditForm]:
        term = self.store.get(term_id)
        self.editing = TermEditForm.from_term(term) if term else None
        return self.editing

    def cancel_edit(self) -> None:
        self.editing = None

    async def save_edit(self) -> bool:
        form = self.editing
        if form is None or not form.term.strip():
            return False
        await self.store.update(
            form.term_id,
            form.term.strip(),
            form.definition.strip(),
            form.notes.strip(),
            form.eli5.strip(),
        )
        self.editing = None
        return True

    # -------------
    # AI explanation
    # -------------
    async def explain(self, term_id: str) -> None:
        term = self.store.get(term_id)
        if term is None:
            return

        self.explaining_term_id = term_id
        self.is_explaining = True
        self.explanation = ""
        self.explanation_error = None
        text: Optional[str] = None
        error: Optional[str] = None
        try:
            text = await self.explainer.explain(term.term)
        except ClientError as e:
            logger.error(f"Error calling explain-term: {e.message}")
            error = f"Failed to get explanation: {e.message or 'Unknown error'}"

        # Panel was closed or moved to another row meanwhile
        if self.explaining_term_id != term_id:
            return
        self.is_explaining = False
        if error:
            self.explanation_error = error
        elif text:
            self.explanation = text
        else:
            self.explanation_error = UNEXPECTED_EXPLANATION

    def close_explanation(self) -> None:
        self.explaining_term_id = None
        self.explanation = ""
        self.explanation_error = None
        self.is_explaining = False
