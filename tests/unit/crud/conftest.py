"""Shared fixtures for crud unit tests"""

import pytest

from docstore.crud.memory_repo import MemoryRepo


@pytest.fixture(name="repo")
def repo_fixture(make_doc):
    """Repository seeded with a single document under id '123'."""
    return MemoryRepo.seeded([make_doc(id="123", content="Some content")])
