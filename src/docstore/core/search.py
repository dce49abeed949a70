"""Search filter: evaluate documents against a SearchRequest"""

from datetime import datetime
from typing import Callable, Iterable, Optional

from docstore.crud.models import Document, SearchRequest


def _any_match(values: Optional[list[str]], predicate: Callable[[str], bool]) -> bool:
    """True when values is None/empty, else when any value satisfies predicate."""
    return not values or any(predicate(v) for v in values)


def _after(created: datetime, bound: Optional[datetime]) -> bool:
    return bound is None or created > bound


def _before(created: datetime, bound: Optional[datetime]) -> bool:
    return bound is None or created < bound


def matches(doc: Document, request: SearchRequest) -> bool:
    """Return True if doc satisfies every constraint set on request.

    Prefix and substring checks are case-sensitive. Both date bounds are exclusive.
    """
    if request is None:
        raise ValueError("Search request must not be None")
    return (
        _any_match(request.title_prefixes, doc.title.startswith)
        and _any_match(request.contains_contents, lambda s: s in doc.content)
        and _any_match(request.author_ids, lambda a: a == doc.author.id)
        and _after(doc.created, request.created_from)
        and _before(doc.created, request.created_to)
    )


def filter_documents(docs: Iterable[Document], request: SearchRequest) -> list[Document]:
    """Return the documents matching request, in input order."""
    if request is None:
        raise ValueError("Search request must not be None")
    return [doc for doc in docs if matches(doc, request)]
