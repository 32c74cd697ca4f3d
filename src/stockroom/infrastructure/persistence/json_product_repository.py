"""JSON-file-backed implementation of ProductRepository.

The file holds one document::

    {"next_id": 3, "products": [{"id": 1, ...}, {"id": 2, ...}]}

``next_id`` is stored on its own so removing the newest product never
frees its ID for reuse.
"""

from __future__ import annotations

import json
from pathlib import Path

from stockroom.domain.model.product import Category, Product
from stockroom.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        document = self._load_raw()
        product_id = document["next_id"]
        document["next_id"] = product_id + 1
        self._persist_raw(document)
        return product_id

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._load_raw()["products"]:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        products = [self._to_domain(raw) for raw in self._load_raw()["products"]]
        return sorted(products, key=lambda p: p.id)

    def save(self, product: Product) -> None:
        document = self._load_raw()
        records = document["products"]

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(product))

        self._persist_raw(document)

    def remove(self, product_id: int) -> Product | None:
        document = self._load_raw()
        for i, raw in enumerate(document["products"]):
            if raw["id"] == product_id:
                del document["products"][i]
                self._persist_raw(document)
                return self._to_domain(raw)
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "quantity": product.quantity,
            "category": product.category.value,
            "created_at": product.created_at,
            "updated_at": product.updated_at,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            quantity=raw["quantity"],
            category=Category(raw["category"]),
            created_at=raw["created_at"],
            updated_at=raw.get("updated_at"),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, document: dict) -> None:
        self._file_path.write_text(
            json.dumps(document, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw({"next_id": 1, "products": []})
