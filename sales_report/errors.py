"""
Domain exceptions raised by the report engine.

Every error carries a machine-readable ``code`` and a ``details`` dict next
to the human message, so callers can branch on the code instead of parsing
text.
"""

from typing import Any, Optional


class SalesReportError(ValueError):
    """Base class for report errors."""

    def __init__(self, message: str, code: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class InvalidInputError(SalesReportError):
    """Raised when the dataset is missing, empty or malformed."""

    def __init__(self, reason: str, field: Optional[str] = None):
        super().__init__(
            message=f"Invalid input data: {reason}",
            code="INVALID_INPUT",
            details={"field": field} if field else None,
        )


class MissingDependencyError(SalesReportError):
    """Raised when a required policy function is absent or not callable."""

    def __init__(self, option: str):
        super().__init__(
            message=f"Option '{option}' must be a callable",
            code="MISSING_DEPENDENCY",
            details={"option": option},
        )


class UnknownSellerError(SalesReportError):
    """Raised when a purchase record points at a seller that does not exist."""

    def __init__(self, seller_id: str, receipt_id: Optional[str] = None):
        super().__init__(
            message=f"Seller '{seller_id}' not found",
            code="UNKNOWN_SELLER",
            details={"seller_id": seller_id, "receipt_id": receipt_id},
        )


class UnknownProductError(SalesReportError):
    """Raised when a line item points at an SKU missing from the catalog."""

    def __init__(self, sku: str, receipt_id: Optional[str] = None):
        super().__init__(
            message=f"Product '{sku}' not found",
            code="UNKNOWN_PRODUCT",
            details={"sku": sku, "receipt_id": receipt_id},
        )
