"""Shared fixtures for crud unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.core.models import Author, Document
from docstore.crud.memory_repo import MemoryRepo


JAN_1 = datetime(2024, 1, 1, tzinfo=timezone.utc)
FEB_1 = datetime(2024, 2, 1, tzinfo=timezone.utc)
MAR_1 = datetime(2024, 3, 1, tzinfo=timezone.utc)


@pytest.fixture(name="repo")
def repo_fixture():
    """Empty store with the default missing_created policy."""
    return MemoryRepo()


@pytest.fixture(name="alice")
def alice_fixture():
    return Author(id="a-1", name="Alice")


@pytest.fixture(name="bob")
def bob_fixture():
    return Author(id="b-2", name="Bob")


@pytest.fixture(name="seeded")
def seeded_fixture(repo, alice, bob):
    """Store holding three documents created on Jan 1, Feb 1 and Mar 1."""
    repo.save(Document(id="d1", title="FooBar", content="hello world", author=alice, created=JAN_1))
    repo.save(Document(id="d2", title="Barfoo", content="lorem ipsum", author=bob, created=FEB_1))
    repo.save(Document(id="d3", title=None, content=None, author=None, created=MAR_1))
    return repo
