from sales_report.errors import UnknownProductError, UnknownSellerError
from sales_report.index import ReferenceIndex
from sales_report.logger import get_logger
from sales_report.models import (
    PurchaseRecord,
    SalesDataset,
    SellerStat,
    TopProduct,
)
from sales_report.money import to_decimal
from sales_report.policies import BonusPolicy, RevenuePolicy

logger = get_logger(__name__)

DEFAULT_TOP_PRODUCTS = 10


class SalesAggregator:
    """
    Turns a validated dataset into ranked, finalized ``SellerStat`` entries.

    The aggregator keeps no state between ``aggregate`` calls: indices and
    accumulators are rebuilt for every dataset.
    """

    def __init__(
        self,
        revenue_policy: RevenuePolicy,
        bonus_policy: BonusPolicy,
        top_products_limit: int = DEFAULT_TOP_PRODUCTS,
    ) -> None:
        self.revenue_policy = revenue_policy
        self.bonus_policy = bonus_policy
        self.top_products_limit = top_products_limit

    def aggregate(self, dataset: SalesDataset) -> list[SellerStat]:
        index = ReferenceIndex.build(dataset.sellers, dataset.products)

        stats: dict[str, SellerStat] = {
            seller.id: SellerStat(
                seller_id=seller.id,
                name=f"{seller.first_name} {seller.last_name}",
            )
            for seller in index.list_sellers()
        }

        for record in dataset.purchase_records:
            self._accumulate(record, stats, index)

        # sorted() is stable, sellers with equal profit keep input order
        ranked = sorted(stats.values(), key=lambda s: s.profit, reverse=True)
        self._finalize(ranked)
        return ranked

    # ── per record ───────────────────────────────────────────────────────────

    def _accumulate(
        self,
        record: PurchaseRecord,
        stats: dict[str, SellerStat],
        index: ReferenceIndex,
    ) -> None:
        stat = stats.get(record.seller_id)
        if stat is None:
            logger.error("Receipt %s references unknown seller %s", record.receipt_id, record.seller_id)
            raise UnknownSellerError(record.seller_id, record.receipt_id)

        # one sale per receipt, however many lines it has
        stat.sales_count += 1
        # revenue is taken from the receipt total, not re-derived from lines
        stat.revenue += record.total_amount

        for item in record.items:
            product = index.get_product(item.sku)
            if product is None:
                logger.error("Receipt %s references unknown product %s", record.receipt_id, item.sku)
                raise UnknownProductError(item.sku, record.receipt_id)

            cost = product.purchase_price * product.quantity
            revenue = to_decimal(self.revenue_policy(item, product))
            profit = revenue - product.purchase_price * item.quantity
            logger.debug(
                "seller=%s sku=%s qty=%s revenue=%s profit=%s unit_cost=%s",
                stat.seller_id, item.sku, item.quantity, revenue, profit, cost,
            )

            stat.profit += profit
            stat.products_sold[item.sku] = stat.products_sold.get(item.sku, 0) + item.quantity

    # ── ranking ──────────────────────────────────────────────────────────────

    def _finalize(self, ranked: list[SellerStat]) -> None:
        total = len(ranked)
        for rank, stat in enumerate(ranked):
            stat.bonus = self.bonus_policy(rank, total, stat)
            top = sorted(stat.products_sold.items(), key=lambda kv: kv[1], reverse=True)
            stat.top_products = [
                TopProduct(sku=sku, quantity=quantity)
                for sku, quantity in top[:self.top_products_limit]
            ]
