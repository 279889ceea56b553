"""Tests for the JSON-file-backed product repository."""

import json
import logging
from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@pytest.fixture
def repo(tmp_path):
    return JsonProductRepository(tmp_path / "data" / "products.json")


def _pen():
    return Product(id=1, name="Pen", price=Decimal("100.00"), stock=50, color="Red")


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonProductRepository(path)
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_create_then_get(self, repo):
        repo.create(_pen())
        assert repo.get_by_id(1) == _pen()

    def test_get_missing_returns_none(self, repo):
        assert repo.get_by_id(42) is None

    def test_list_preserves_insertion_order(self, repo):
        repo.create(Product(id=2, name="Notebook"))
        repo.create(_pen())
        assert [p.id for p in repo.list_all()] == [2, 1]

    def test_duplicate_create_rejected(self, repo):
        repo.create(_pen())
        with pytest.raises(ValidationError, match="already exists"):
            repo.create(_pen())

    def test_update(self, repo):
        repo.create(_pen())
        repo.update(Product(id=1, name="Fountain pen", price=Decimal("150")))
        assert repo.get_by_id(1).name == "Fountain pen"
        assert repo.get_by_id(1).price == Decimal("150")

    def test_update_missing_rejected(self, repo):
        with pytest.raises(ValidationError, match="does not exist"):
            repo.update(_pen())

    def test_delete(self, repo):
        repo.create(_pen())
        repo.delete(_pen())
        assert repo.list_all() == []

    def test_delete_none_is_noop(self, repo):
        repo.create(_pen())
        repo.delete(None)
        assert len(repo.list_all()) == 1

    def test_next_id(self, repo):
        assert repo.next_id() == 1
        repo.create(Product(id=5, name="Ruler"))
        assert repo.next_id() == 6

    def test_price_stored_as_string(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).create(_pen())
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw == [
            {"id": 1, "name": "Pen", "price": "100.00", "stock": 50, "color": "Red"}
        ]

    def test_non_ascii_names_round_trip(self, repo):
        repo.create(Product(id=1, name="Kalem", color="Kırmızı"))
        assert repo.get_by_id(1).color == "Kırmızı"


class TestHandEditedFiles:

    def _write(self, tmp_path, items):
        path = tmp_path / "products.json"
        path.write_text(json.dumps(items), encoding="utf-8")
        return JsonProductRepository(path)

    def test_float_price_keeps_its_decimal_text(self, tmp_path):
        repo = self._write(tmp_path, [{"id": 1, "name": "Pen", "price": 0.1}])
        assert repo.get_by_id(1).price == Decimal("0.1")

        repo.update(Product(id=1, name="Pencil", price=repo.get_by_id(1).price))
        raw = json.loads((tmp_path / "products.json").read_text(encoding="utf-8"))
        assert raw[0]["price"] == "0.1"

    def test_null_price_loads_as_zero(self, tmp_path):
        repo = self._write(tmp_path, [{"id": 1, "name": "Pen", "price": None}])
        assert repo.list_all()[0].price == Decimal("0")

    def test_missing_optional_fields_default(self, tmp_path):
        repo = self._write(tmp_path, [{"id": "3", "name": "Pen"}])
        assert repo.get_by_id(3) == Product(id=3, name="Pen")


class TestLogging:

    def test_create_logs_at_info(self, repo, caplog):
        name = "catalog.infrastructure.persistence.json_product_repository"
        caplog.set_level(logging.INFO, logger=name)

        repo.create(_pen())

        records = [r for r in caplog.records if r.name == name]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert "#1 Pen" in records[0].getMessage()
