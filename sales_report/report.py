from sales_report.models import SellerReport, SellerStat
from sales_report.money import round_money


def assemble_report(stats: list[SellerStat]) -> list[SellerReport]:
    """Project ranked stats into report rows, keeping their order."""
    return [
        SellerReport(
            seller_id=stat.seller_id,
            name=stat.name,
            revenue=round_money(stat.revenue),
            profit=round_money(stat.profit),
            sales_count=stat.sales_count,
            top_products=[p.model_copy() for p in stat.top_products],
            bonus=round_money(stat.bonus),
        )
        for stat in stats
    ]
