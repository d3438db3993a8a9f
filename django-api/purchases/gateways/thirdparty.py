"""Default gateway implementations standing in for the external providers.

They check their arguments and record the request. Real integrations are
expected to replace them.
"""

import logging

from purchases.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway

logger = logging.getLogger(__name__)


def _require_non_negative_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise TypeError(f"{name} must be a non-negative integer")


class TicketPaymentService(TicketPaymentGateway):
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        _require_non_negative_int("account_id", account_id)
        _require_non_negative_int("total_amount_to_pay", total_amount_to_pay)
        logger.info(
            "Payment requested",
            extra={"account_id": account_id, "amount": total_amount_to_pay},
        )


class SeatReservationService(SeatReservationGateway):
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        _require_non_negative_int("account_id", account_id)
        _require_non_negative_int("total_seats_to_allocate", total_seats_to_allocate)
        logger.info(
            "Seat reservation requested",
            extra={"account_id": account_id, "seats": total_seats_to_allocate},
        )
