from sales_report.aggregator import SalesAggregator
from sales_report.config import settings
from sales_report.logger import get_logger
from sales_report.models import SellerReport
from sales_report.policies import (
    ReportOptions,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
)
from sales_report.report import assemble_report
from sales_report.validation import validate_dataset, validate_options

logger = get_logger(__name__)


def default_options() -> ReportOptions:
    return ReportOptions(
        calculate_revenue=calculate_simple_revenue,
        calculate_bonus=calculate_bonus_by_profit,
    )


def analyze_sales_data(data, options) -> list[SellerReport]:
    """
    Build the per-seller performance report.

    ``data`` is a SalesDataset or a mapping with ``sellers``, ``products`` and
    ``purchase_records``; ``options`` is a ReportOptions or a mapping holding
    the ``calculate_revenue`` and ``calculate_bonus`` callables. Rows come
    back ranked by profit, highest first.

    Raises InvalidInputError / MissingDependencyError before any work is done,
    and UnknownSellerError / UnknownProductError on dangling references.
    """
    dataset = validate_dataset(data)
    opts = validate_options(options)

    # ── 1. Aggregate and rank ────────────────────────────────────────────────
    aggregator = SalesAggregator(
        revenue_policy=opts.calculate_revenue,
        bonus_policy=opts.calculate_bonus,
        top_products_limit=opts.top_products_limit or settings.TOP_PRODUCTS_LIMIT,
    )
    logger.info(
        "Analyzing %d purchase records for %d sellers",
        len(dataset.purchase_records), len(dataset.sellers),
    )
    stats = aggregator.aggregate(dataset)

    # ── 2. Project into report rows ──────────────────────────────────────────
    rows = assemble_report(stats)
    logger.info("Report ready: %d rows", len(rows))
    return rows
