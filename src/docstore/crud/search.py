"""Search predicates: title prefix, content substring, author id, created range"""

from docstore.core.models import Document, SearchRequest


MISSING_CREATED_POLICIES = ("exclude", "raise")


def is_empty_request(request: SearchRequest | None) -> bool:
    """True when the request is None or none of its five fields constrain anything."""
    if request is None:
        return True
    return (
        not request.title_prefixes
        and not request.contains_contents
        and not request.author_ids
        and request.created_from is None
        and request.created_to is None
    )


def title_matches(doc: Document, request: SearchRequest) -> bool:
    """Title starts with any requested prefix; vacuous when no prefixes are given."""
    if not request.title_prefixes:
        return True
    return doc.title is not None and any(doc.title.startswith(p) for p in request.title_prefixes)


def content_matches(doc: Document, request: SearchRequest) -> bool:
    """Content contains any requested substring; vacuous when none are given."""
    if not request.contains_contents:
        return True
    return doc.content is not None and any(s in doc.content for s in request.contains_contents)


def author_matches(doc: Document, request: SearchRequest) -> bool:
    """Author id is one of the requested ids; vacuous when none are given."""
    if not request.author_ids:
        return True
    return doc.author is not None and doc.author.id in request.author_ids


def created_matches(doc: Document, request: SearchRequest, missing_created: str = "exclude") -> bool:
    """Created falls within [created_from, created_to], both bounds inclusive.

    A document without a created timestamp never matches a bounded request under
    the 'exclude' policy; under 'raise' it raises ValueError.
    """
    if request.created_from is None and request.created_to is None:
        return True
    if doc.created is None:
        if missing_created == "raise":
            raise ValueError(f"Document {doc.id} has no created timestamp")
        return False
    if request.created_from is not None and doc.created < request.created_from:
        return False
    if request.created_to is not None and doc.created > request.created_to:
        return False
    return True


def matches(doc: Document, request: SearchRequest, missing_created: str = "exclude") -> bool:
    """All four predicates hold (AND)."""
    return (
        title_matches(doc, request)
        and content_matches(doc, request)
        and author_matches(doc, request)
        and created_matches(doc, request, missing_created)
    )
