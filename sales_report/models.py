from pydantic import BaseModel, Field
from decimal import Decimal
from typing import Optional


class Seller(BaseModel):
    id: str
    first_name: str
    last_name: str
    start_date: Optional[str] = None
    position: Optional[str] = None


class Product(BaseModel):
    sku: str
    purchase_price: Decimal
    quantity: int = 1  # units per unit of sale, used for cost basis
    name: Optional[str] = None
    category: Optional[str] = None
    sale_price: Optional[Decimal] = None


class LineItem(BaseModel):
    sku: str
    quantity: int
    sale_price: Decimal
    discount: Decimal = Decimal("0")  # percent, e.g. Decimal("10") for 10%


class PurchaseRecord(BaseModel):
    seller_id: str
    total_amount: Decimal
    items: list[LineItem]
    receipt_id: Optional[str] = None
    date: Optional[str] = None
    customer_id: Optional[str] = None
    total_discount: Optional[Decimal] = None


class SalesDataset(BaseModel):
    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]


# ── Aggregation state ────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    sku: str
    quantity: int


class SellerStat(BaseModel):
    seller_id: str
    name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0
    # insertion-ordered: first sale of a sku decides its place among ties
    products_sold: dict[str, int] = Field(default_factory=dict)
    # set once the seller has been ranked
    bonus: Decimal = Decimal("0")
    top_products: list[TopProduct] = Field(default_factory=list)


# ── Response models ──────────────────────────────────────────────────────────

class SellerReport(BaseModel):
    seller_id: str
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: list[TopProduct]
    bonus: Decimal
