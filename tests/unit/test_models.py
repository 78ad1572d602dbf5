"""Tests for the documents ORM model and its registration on Base.metadata."""

from src.infrastructure.database import Base
from src.infrastructure.persistence import __all__ as persistence_all
from src.infrastructure.persistence.models import Document


def test_documents_table_registered():
    assert "documents" in Base.metadata.tables


def test_documents_primary_key_is_collection_and_key():
    pk = [c.name for c in Base.metadata.tables["documents"].primary_key.columns]
    assert pk == ["collection", "key"]


def test_documents_data_column_not_nullable():
    assert Base.metadata.tables["documents"].c.data.nullable is False


def test_document_construction():
    row = Document(collection="stocks", key="ACME", data={"name": "ACME"})
    assert (row.collection, row.key, row.data) == ("stocks", "ACME", {"name": "ACME"})


def test_persistence_package_exports_document():
    assert "Document" in persistence_all
