"""
Deterministic sample-data generator.

Produces:
  - 5 sellers
  - 40 products  (SKU_001 … SKU_040)
  - 300 purchase records spread over Jan 2026
    - 1-5 line items each
    - discounts of 0 / 5 / 10 / 15 / 20 %
    - total_amount equal to the sum of the discounted lines

Run directly to print the report for the generated data.
"""

import random
from datetime import date, timedelta
from decimal import Decimal

from sales_report.engine import analyze_sales_data, default_options
from sales_report.logger import get_logger, setup_logging
from sales_report.models import LineItem, Product, PurchaseRecord, SalesDataset, Seller
from sales_report.money import round_money

SEED = 42
START = date(2026, 1, 1)
DAYS  = 31

logger = get_logger(__name__)

_SELLERS = [
    ("seller_1", "Alexey", "Petrov", "Senior Seller"),
    ("seller_2", "Ivan", "Smirnov", "Seller"),
    ("seller_3", "Maria", "Ivanova", "Senior Seller"),
    ("seller_4", "Olga", "Kuznetsova", "Junior Seller"),
    ("seller_5", "Dmitry", "Sokolov", "Seller"),
]
_CATEGORIES = ["Electronics", "Home", "Toys", "Books", "Sports"]
_DISCOUNTS = [0, 0, 5, 10, 15, 20]


def _money(rng: random.Random, lo: int, hi: int) -> Decimal:
    return Decimal(rng.randint(lo * 100, hi * 100)) / 100


def build_dataset(
    seed: int = SEED,
    product_count: int = 40,
    record_count: int = 300,
) -> SalesDataset:
    rng = random.Random(seed)

    # ── sellers ──────────────────────────────────────────────────────────────
    sellers = [
        Seller(
            id=sid,
            first_name=first,
            last_name=last,
            position=position,
            start_date=str(START - timedelta(days=rng.randint(30, 900))),
        )
        for sid, first, last, position in _SELLERS
    ]

    # ── products ─────────────────────────────────────────────────────────────
    products = []
    for n in range(1, product_count + 1):
        purchase_price = _money(rng, 5, 300)
        products.append(Product(
            sku=f"SKU_{n:03d}",
            name=f"Product {n}",
            category=rng.choice(_CATEGORIES),
            purchase_price=purchase_price,
            sale_price=(purchase_price * Decimal(rng.choice(["1.2", "1.4", "1.6"]))).quantize(Decimal("0.01")),
            quantity=rng.randint(1, 5),
        ))

    # ── purchase records ─────────────────────────────────────────────────────
    records = []
    for n in range(1, record_count + 1):
        items = []
        for product in rng.sample(products, rng.randint(1, 5)):
            items.append(LineItem(
                sku=product.sku,
                quantity=rng.randint(1, 10),
                sale_price=product.sale_price,
                discount=Decimal(rng.choice(_DISCOUNTS)),
            ))

        gross = sum((i.sale_price * i.quantity for i in items), Decimal("0"))
        total = sum(
            (round_money(i.sale_price * i.quantity * (1 - i.discount / 100)) for i in items),
            Decimal("0"),
        )
        records.append(PurchaseRecord(
            receipt_id=f"receipt_{n}",
            date=str(START + timedelta(days=rng.randrange(DAYS))),
            seller_id=rng.choice(sellers).id,
            customer_id=f"customer_{rng.randint(1, 60)}",
            items=items,
            total_amount=total,
            total_discount=gross - total,
        ))

    return SalesDataset(sellers=sellers, products=products, purchase_records=records)


def main() -> None:
    setup_logging()
    report = analyze_sales_data(build_dataset(), default_options())
    for row in report:
        logger.info(
            "%-10s %-20s revenue=%s profit=%s sales=%d bonus=%s",
            row.seller_id, row.name, row.revenue, row.profit, row.sales_count, row.bonus,
        )


if __name__ == "__main__":
    main()
