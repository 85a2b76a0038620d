"""
Pluggable pricing and bonus policies.

Any callable with the matching signature can be passed to the aggregator;
the two functions below are the defaults used by ``default_options()``.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Protocol

from sales_report.models import LineItem, Product, SellerStat
from sales_report.money import percent_of

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


class RevenuePolicy(Protocol):
    def __call__(self, item: LineItem, product: Product) -> Decimal: ...


class BonusPolicy(Protocol):
    def __call__(self, index: int, total: int, stat: SellerStat) -> Decimal: ...


def calculate_simple_revenue(item: LineItem, _product: Product) -> Decimal:
    """Line revenue after the percentage discount.

    The discount is not bounds-checked: 150 % yields negative revenue and
    -10 % yields a markup.
    """
    return item.sale_price * item.quantity * (1 - item.discount / _HUNDRED)


def calculate_bonus_by_profit(index: int, total: int, stat: SellerStat) -> Decimal:
    """Bonus for the seller at ``index`` of the profit-descending ranking.

    Checks run top-down and the first match wins, so a lone seller is both
    first and last and still gets the 15 % tier.
    """
    if index == 0:
        return percent_of(stat.profit, 15)

    if index in (1, 2):
        return percent_of(stat.profit, 10)

    if index == total - 1:
        return _ZERO

    return percent_of(stat.profit, 5)


@dataclass
class ReportOptions:
    calculate_revenue: Optional[RevenuePolicy] = None
    calculate_bonus: Optional[BonusPolicy] = None
    # None falls back to settings.TOP_PRODUCTS_LIMIT
    top_products_limit: Optional[int] = None
