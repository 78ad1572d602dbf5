"""Tests for src/domain/models/stock.py."""

import pytest
from pydantic import ValidationError

from src.domain.models.stock import Stock, StockField


# --- Stock ---

def test_stock_construction():
    s = Stock(name="ACME", price=1000)
    assert s.name == "ACME"
    assert s.price == 1000


def test_stock_popularity_defaults_to_zero():
    assert Stock(name="ACME", price=1000).popularity == 0


def test_stock_create_named_constructor():
    s = Stock.create("ACME", 12.5)
    assert (s.name, s.price, s.popularity) == ("ACME", 12.5, 0)


def test_stock_rejects_empty_name():
    with pytest.raises(ValidationError):
        Stock(name="", price=1000)


def test_stock_rejects_negative_price():
    with pytest.raises(ValidationError):
        Stock(name="ACME", price=-1)


def test_stock_name_cannot_be_reassigned():
    s = Stock(name="ACME", price=1000)
    with pytest.raises(ValidationError):
        s.name = "OTHER"


def test_set_popularity_updates_value():
    s = Stock(name="ACME", price=1000)
    s.set_popularity(7)
    assert s.popularity == 7


def test_update_price_updates_value():
    s = Stock(name="ACME", price=1000)
    s.update_price(1250.5)
    assert s.price == 1250.5


def test_update_price_validates_assignment():
    s = Stock(name="ACME", price=1000)
    with pytest.raises(ValidationError):
        s.update_price(-5)
    assert s.price == 1000


def test_stock_json_dump_uses_field_names():
    data = Stock(name="ACME", price=10, popularity=3).model_dump(mode="json")
    assert data == {"name": "ACME", "price": 10.0, "popularity": 3}


# --- StockField ---

def test_stock_field_values_match_model_fields():
    assert {f.value for f in StockField} == set(Stock.model_fields)


def test_stock_field_compares_equal_to_plain_string():
    assert StockField.POPULARITY == "popularity"
