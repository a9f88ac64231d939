"""In-memory document store: upsert by id, exact-id lookup, predicate search"""

from __future__ import annotations
from dataclasses import dataclass, field

from loguru import logger

from docstore.config import Settings
from docstore.core.models import Document, SearchRequest
from docstore.core.utils.ids import new_id, utcnow
from docstore.crud.repo import DocumentRepo
from docstore.crud.search import MISSING_CREATED_POLICIES, is_empty_request, matches


@dataclass
class MemoryRepo(DocumentRepo):
    """Owns its collection; insertion order of _docs is the collection order."""
    missing_created: str = "exclude"
    _docs: dict[str, Document] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        if self.missing_created not in MISSING_CREATED_POLICIES:
            raise ValueError(f"Unknown missing_created policy: {self.missing_created!r}")

    @classmethod
    def from_settings(cls, settings: Settings) -> MemoryRepo:
        return cls(missing_created=settings.missing_created)

    def __len__(self) -> int:
        return len(self._docs)

    def save(self, doc: Document) -> Document:
        """Upsert doc, keeping created pinned to the first save of its id.

        Mutates and returns the given instance. A replaced record moves to the end
        of the collection order.
        """
        if not doc.id:
            doc.id = new_id()

        # a stored instance whose id was changed by the caller is still keyed by its old id
        for key in [k for k, v in self._docs.items() if v is doc and k != doc.id]:
            del self._docs[key]

        existing = self._docs.pop(doc.id, None)
        if existing is not None:
            doc.created = existing.created
            logger.debug("Updated document {}", doc.id)
        else:
            logger.debug("Created document {}", doc.id)
        # stored records always carry a created timestamp
        if doc.created is None:
            doc.created = utcnow()

        self._docs[doc.id] = doc
        return doc

    def find_by_id(self, doc_id: str) -> Document | None:
        """Exact, case-sensitive lookup. Raises ValueError for a None id."""
        if doc_id is None:
            raise ValueError("id must not be None")
        doc = self._docs.get(doc_id)
        if doc is not None and doc.id == doc_id:
            return doc
        # ids changed on held instances since their last save
        return next((d for d in self._docs.values() if d.id == doc_id), None)

    def search(self, request: SearchRequest | None) -> list[Document]:
        """Documents passing every requested filter, in collection order.

        A missing request, or one with all fields empty, matches nothing.
        """
        if is_empty_request(request):
            return []
        found = [d for d in self._docs.values() if matches(d, request, self.missing_created)]
        logger.debug("Search matched {} of {} document(s)", len(found), len(self._docs))
        return found
