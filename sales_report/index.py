from typing import Optional, Iterable

from sales_report.logger import get_logger
from sales_report.models import Seller, Product

logger = get_logger(__name__)


class ReferenceIndex:
    """Seller and product lookups for a single report run."""

    def __init__(self) -> None:
        self.sellers: dict[str, Seller] = {}
        self.products: dict[str, Product] = {}

    @classmethod
    def build(cls, sellers: Iterable[Seller], products: Iterable[Product]) -> "ReferenceIndex":
        index = cls()
        for seller in sellers:
            index.add_seller(seller)
        for product in products:
            index.add_product(product)
        return index

    # ── writes ────────────────────────────────────────────────────────────────
    # duplicate keys: the later entry replaces the earlier one

    def add_seller(self, seller: Seller) -> None:
        if seller.id in self.sellers:
            logger.warning("Duplicate seller id %s, keeping the last entry", seller.id)
        self.sellers[seller.id] = seller

    def add_product(self, product: Product) -> None:
        if product.sku in self.products:
            logger.warning("Duplicate product sku %s, keeping the last entry", product.sku)
        self.products[product.sku] = product

    # ── reads ─────────────────────────────────────────────────────────────────

    def get_seller(self, seller_id: str) -> Optional[Seller]:
        return self.sellers.get(seller_id)

    def get_product(self, sku: str) -> Optional[Product]:
        return self.products.get(sku)

    def list_sellers(self) -> list[Seller]:
        return list(self.sellers.values())
