"""Product catalog.

The catalog is static data: a fixed set of products, each with a unit price in
minor units (cents) and the SKU the backend knows it by.

It is passed around explicitly (instead of being read from module globals) so
tests can build their own catalogs.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import UnknownProductError


class CatalogEntry(BaseModel):
    """One product the shop sells.

    Fields:
        id: Local product id used in cart state (e.g. "banana").
        name: Display name shown next to the cart controls.
        unit_price: Price of one unit in minor units (cents). Must be > 0.
        external_sku: Backend-defined SKU id sent in the order payload.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    unit_price: int = Field(gt=0)
    external_sku: int


class Catalog(BaseModel):
    """An immutable, ordered set of catalog entries."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[CatalogEntry, ...]

    @model_validator(mode="after")
    def _ids_are_unique(self) -> "Catalog":
        ids = [entry.id for entry in self.entries]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate product ids in catalog: {ids}")
        return self

    def __getitem__(self, product_id: str) -> CatalogEntry:
        for entry in self.entries:
            if entry.id == product_id:
                return entry
        raise UnknownProductError(product_id)

    def __contains__(self, product_id: object) -> bool:
        return any(entry.id == product_id for entry in self.entries)

    def ids(self) -> list[str]:
        return [entry.id for entry in self.entries]


DEFAULT_CATALOG = Catalog(
    entries=(
        CatalogEntry(id="banana", name="Banana", unit_price=150, external_sku=1),
        CatalogEntry(id="cucumber", name="Cucumber", unit_price=100, external_sku=2),
    )
)


def format_usd(amount: int) -> str:
    """Format an amount in cents as US dollars, e.g. 1234567 -> "$12,345.67"."""
    dollars, cents = divmod(amount, 100)
    return f"${dollars:,}.{cents:02d}"
