"""
Up-front checks for ``analyze_sales_data``.

Everything here runs before aggregation starts, so a rejected call never
produces a partial report.
"""

from collections.abc import Mapping

from pydantic import ValidationError

from sales_report.errors import InvalidInputError, MissingDependencyError
from sales_report.models import SalesDataset
from sales_report.policies import ReportOptions

REQUIRED_COLLECTIONS = ("sellers", "products", "purchase_records")

# mapping options may use either spelling
_OPTION_KEYS = {
    "calculate_revenue": ("calculate_revenue", "calculateRevenue"),
    "calculate_bonus": ("calculate_bonus", "calculateBonus"),
    "top_products_limit": ("top_products_limit", "topProductsLimit"),
}


def validate_dataset(data) -> SalesDataset:
    if data is None:
        raise InvalidInputError("dataset is missing")

    if isinstance(data, SalesDataset):
        collections = {name: getattr(data, name) for name in REQUIRED_COLLECTIONS}
    elif isinstance(data, Mapping):
        collections = {name: data.get(name) for name in REQUIRED_COLLECTIONS}
    else:
        raise InvalidInputError(f"expected a mapping or SalesDataset, got {type(data).__name__}")

    for name, value in collections.items():
        if value is None:
            raise InvalidInputError(f"'{name}' is missing", field=name)
        if not isinstance(value, (list, tuple)):
            raise InvalidInputError(f"'{name}' must be a sequence", field=name)
        if not value:
            raise InvalidInputError(f"'{name}' is empty", field=name)

    if isinstance(data, SalesDataset):
        return data

    try:
        return SalesDataset.model_validate({name: list(value) for name, value in collections.items()})
    except ValidationError as exc:
        raise InvalidInputError(f"{exc.error_count()} malformed record field(s): {exc.errors()[0]['loc']}") from exc


def validate_options(options) -> ReportOptions:
    if options is None:
        raise MissingDependencyError("calculate_revenue")

    if isinstance(options, Mapping):
        values = {}
        for field, keys in _OPTION_KEYS.items():
            values[field] = next((options[k] for k in keys if k in options), None)
        options = ReportOptions(**values)

    for name in ("calculate_revenue", "calculate_bonus"):
        if not callable(getattr(options, name, None)):
            raise MissingDependencyError(name)

    limit = getattr(options, "top_products_limit", None)
    if limit is not None and (not isinstance(limit, int) or limit < 1):
        raise InvalidInputError("top_products_limit must be a positive integer", field="top_products_limit")

    return ReportOptions(
        calculate_revenue=options.calculate_revenue,
        calculate_bonus=options.calculate_bonus,
        top_products_limit=limit,
    )
