"""Gateway interfaces for the external payment and seat booking providers.

Gateways must be swappable. The purchase service never depends on a concrete
provider.
"""

from abc import ABC, abstractmethod


class TicketPaymentGateway(ABC):
    """Interface for collecting payment for a purchase."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge the account the given amount."""
        ...


class SeatReservationGateway(ABC):
    """Interface for reserving seats for a purchase."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve the given number of seats for the account."""
        ...
