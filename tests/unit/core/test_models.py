"""Unit tests for core/models.py"""

from datetime import datetime, timedelta, timezone

from docstore.core.models import Author, Document, SearchRequest


def test_document_defaults_are_none():
    doc = Document()
    assert (doc.id, doc.title, doc.content, doc.author, doc.created) == (None, None, None, None, None)


def test_document_naive_created_read_as_utc():
    doc = Document(created=datetime(2024, 1, 1, 9, 30))
    assert doc.created == datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)


def test_document_aware_created_kept():
    """An aware timestamp keeps its offset."""
    tz = timezone(timedelta(hours=2))
    doc = Document(created=datetime(2024, 1, 1, 9, 30, tzinfo=tz))
    assert doc.created.utcoffset() == timedelta(hours=2)


def test_document_parses_iso_string():
    doc = Document.model_validate({"id": "x", "created": "2024-05-01T10:00:00Z", "author": {"id": "a"}})
    assert doc.created == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)
    assert doc.author == Author(id="a")


def test_search_request_bounds_read_as_utc():
    req = SearchRequest(created_from=datetime(2024, 1, 1), created_to=datetime(2024, 2, 1))
    assert req.created_from.tzinfo is timezone.utc
    assert req.created_to.tzinfo is timezone.utc


def test_search_request_fields_optional():
    req = SearchRequest()
    assert req.title_prefixes is None
    assert req.contains_contents is None
    assert req.author_ids is None


def test_document_is_mutable():
    """The store assigns id and created on the caller's instance."""
    doc = Document()
    doc.id = "assigned"
    assert doc.id == "assigned"


def test_document_assigned_naive_created_read_as_utc():
    """Validation also runs on attribute assignment."""
    doc = Document()
    doc.created = datetime(2024, 1, 1, 9, 30)
    assert doc.created == datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)
    assert doc.created.tzinfo is timezone.utc


def test_document_assigned_iso_string_parsed():
    doc = Document()
    doc.created = "2024-05-01T10:00:00Z"
    assert doc.created == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)


def test_search_request_assigned_bound_read_as_utc():
    req = SearchRequest()
    req.created_to = datetime(2024, 2, 1)
    assert req.created_to.tzinfo is timezone.utc
