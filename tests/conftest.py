"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from rdflib import Literal, Namespace, URIRef

from rdfmodels import LocalGraphStore, Quad
from rdfmodels.config import reset_settings
from rdfmodels.core.vocabulary import A, FOAF

EX = Namespace("https://ex/")


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from RDFMODELS_* variables and cached settings."""
    for name in (
        "RDFMODELS_INCLUDE_BLANK_NODES",
        "RDFMODELS_LENIENT_EMAIL_LITERALS",
        "RDFMODELS_DEFAULT_COUNT",
        "RDFMODELS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def ex():
    return EX


@pytest.fixture
def store():
    """Fresh empty in-memory store."""
    return LocalGraphStore()


@pytest.fixture
def alice_store():
    """Store holding Alice typed as a person, with a name and a mailbox."""
    return LocalGraphStore(
        [
            Quad(EX.alice, A, FOAF.Person),
            Quad(EX.alice, FOAF.name, Literal("Alice", lang="en")),
            Quad(EX.alice, FOAF.mbox, URIRef("mailto:alice@example.org")),
        ]
    )
