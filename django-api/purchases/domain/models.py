"""Domain models for a single purchase.

Nothing here is persisted. Counts and totals live only for the duration of
one purchase and are rebuilt on every call.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Self

from purchases.domain.value_objects import TicketType

TicketCountsByType = dict[TicketType, int]

DEFAULT_TICKET_PRICES = {
    TicketType.INFANT: 0,
    TicketType.CHILD: 10,
    TicketType.ADULT: 20,
}

DEFAULT_MAX_TICKETS_PER_PURCHASE = 20


def empty_ticket_counts() -> TicketCountsByType:
    """Return a fresh zero count for every ticket type."""
    return {ticket_type: 0 for ticket_type in TicketType}


@dataclass(frozen=True)
class PriceTable:
    """Unit price per ticket type. Infants always travel free."""

    prices: Mapping[TicketType, int]

    def __post_init__(self) -> None:
        missing = [t.value for t in TicketType if t not in self.prices]
        if missing:
            raise ValueError(f"No price for ticket types: {', '.join(missing)}")
        for ticket_type, price in self.prices.items():
            if isinstance(price, bool) or not isinstance(price, int):
                raise ValueError(f"Price for {ticket_type.value} must be an integer")
            if price < 0:
                raise ValueError(f"Price for {ticket_type.value} cannot be negative")
        if self.prices[TicketType.INFANT] != 0:
            raise ValueError("INFANT tickets must be free")
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

    @classmethod
    def default(cls) -> Self:
        return cls(prices=DEFAULT_TICKET_PRICES)

    def price_of(self, ticket_type: TicketType) -> int:
        return self.prices[ticket_type]


@dataclass(frozen=True)
class PurchasePolicy:
    """Pricing and limits applied to every purchase."""

    prices: PriceTable = field(default_factory=PriceTable.default)
    max_tickets_per_purchase: int = DEFAULT_MAX_TICKETS_PER_PURCHASE

    def __post_init__(self) -> None:
        if (
            isinstance(self.max_tickets_per_purchase, bool)
            or not isinstance(self.max_tickets_per_purchase, int)
            or self.max_tickets_per_purchase < 1
        ):
            raise ValueError("max_tickets_per_purchase must be a positive integer")


@dataclass(frozen=True)
class PurchaseTotals:
    """What a validated purchase costs and how many seats it occupies."""

    total_amount: int
    total_seats: int
