"""
Pytest configuration and fixtures for the AIML department gateway tests
"""

from pathlib import Path

import pytest

from aiml_gateway.services.content_store import ContentStore, load_content
from aiml_gateway.services.context_store import ConversationContextStore

DATA_DIR = Path(__file__).resolve().parents[2] / "data"


@pytest.fixture(scope="session")
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture(scope="session")
def content() -> ContentStore:
    """The shipped department fixtures, validated"""
    return load_content(DATA_DIR)


@pytest.fixture
def empty_content() -> ContentStore:
    return ContentStore()


@pytest.fixture
def contexts() -> ConversationContextStore:
    return ConversationContextStore(limit=10)
