"""In-memory document repository: upsert, lookup by id and search"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable
from uuid import uuid4

from docstore.core.search import filter_documents
from docstore.crud.models import Document, SearchRequest, as_utc
from docstore.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "content", "author")


def _check_required(doc: Document) -> None:
    """Raise ValueError naming the first required field that is missing or None."""
    if doc is None:
        raise ValueError("Cannot save None")
    for name in REQUIRED_FIELDS:
        if getattr(doc, name, None) is None:
            raise ValueError(f"Document {doc.id!r} has no {name}")


@dataclass
class MemoryRepo(DocumentRepo):
    """Single-threaded store keyed by document id.

    Documents are deep-copied on the way in and on the way out, so callers never
    share state with the store. Iteration order is insertion order; overwriting
    an id keeps its original position.
    """
    _docs: dict[str, Document] = field(default_factory=dict)

    @classmethod
    def seeded(cls, docs: Iterable[Document]) -> MemoryRepo:
        """Build a repo holding docs under their own ids. Missing created times are stamped now."""
        repo = cls()
        for doc in docs:
            _check_required(doc)
            if doc.is_new:
                raise ValueError(f"Cannot seed document without an id: {doc.title!r}")
            stored = doc.model_copy(deep=True)
            stored.created = as_utc(stored.created) or datetime.now(timezone.utc)
            repo._docs[stored.id] = stored
        logger.debug("Seeded repository with %d document(s)", len(repo._docs))
        return repo

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs

    def _new_id(self) -> str:
        doc_id = str(uuid4())
        while doc_id in self._docs:
            doc_id = str(uuid4())
        return doc_id

    def save(self, doc: Document) -> Document:
        """Insert a new document or overwrite the one stored under doc.id.

        A new document (no id) gets a fresh unique id and, if unset, a creation
        time of now (UTC). An overwrite replaces every field except `created`,
        which always keeps the value recorded at first save.
        """
        _check_required(doc)

        stored = doc.model_copy(deep=True)
        existing = None if doc.is_new else self._docs.get(doc.id)

        if doc.is_new:
            stored.id = self._new_id()
            logger.debug("Assigned id %s to new document", stored.id)
        if existing is not None:
            stored.created = existing.created
            logger.debug("Overwriting document %s", stored.id)
        else:
            stored.created = as_utc(stored.created) or datetime.now(timezone.utc)

        self._docs[stored.id] = stored
        return stored.model_copy(deep=True)

    def find_by_id(self, doc_id: str) -> Document | None:
        doc = self._docs.get(doc_id)
        return doc.model_copy(deep=True) if doc else None

    def search(self, request: SearchRequest) -> list[Document]:
        results = filter_documents(self._docs.values(), request)
        logger.debug("Search matched %d of %d document(s)", len(results), len(self._docs))
        return [doc.model_copy(deep=True) for doc in results]
