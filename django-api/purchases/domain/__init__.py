from purchases.domain.errors import DomainError, ErrorCode, InvalidPurchaseError
from purchases.domain.models import (
    PriceTable,
    PurchasePolicy,
    PurchaseTotals,
    TicketCountsByType,
    empty_ticket_counts,
)
from purchases.domain.value_objects import TicketType, TicketTypeRequest

__all__ = [
    "TicketType",
    "TicketTypeRequest",
    "TicketCountsByType",
    "PriceTable",
    "PurchasePolicy",
    "PurchaseTotals",
    "empty_ticket_counts",
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
]
