"""Static product catalog supplied to the cart engine."""
from decimal import Decimal
from typing import Iterable, Iterator, Optional

from pydantic import BaseModel, Field, field_validator

from storefront.errors import ERROR_DUPLICATE_CATALOG_ID
from storefront.money import parse_price


class CatalogEntry(BaseModel):
    """Purchasable item: id, name and unit price."""
    id: int
    name: str = Field(..., min_length=1)
    unit_price: Decimal = Field(..., ge=0)

    class Config:
        frozen = True

    @field_validator("unit_price", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return parse_price(v)


class Catalog:
    """Ordered, read-only set of catalog entries keyed by id."""

    def __init__(self, entries: Iterable[CatalogEntry]):
        self._entries: tuple[CatalogEntry, ...] = tuple(entries)
        self._by_id: dict[int, CatalogEntry] = {}
        for entry in self._entries:
            if entry.id in self._by_id:
                raise ValueError(ERROR_DUPLICATE_CATALOG_ID.format(id=entry.id))
            self._by_id[entry.id] = entry

    @classmethod
    def from_dicts(cls, rows: Iterable[dict]) -> "Catalog":
        """Build a catalog from plain dicts (``id``, ``name``, ``unit_price``)."""
        return cls(CatalogEntry(**row) for row in rows)

    def get(self, entry_id: int) -> Optional[CatalogEntry]:
        return self._by_id.get(entry_id)

    @property
    def entries(self) -> tuple[CatalogEntry, ...]:
        return self._entries

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._by_id

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


DEFAULT_CATALOG_ROWS = [
    {"id": 1, "name": "Premium Widget", "unit_price": "99.99"},
    {"id": 2, "name": "Basic Gadget", "unit_price": "49.99"},
    {"id": 3, "name": "Deluxe Package", "unit_price": "199.99"},
]


def default_catalog() -> Catalog:
    return Catalog.from_dicts(DEFAULT_CATALOG_ROWS)
