"""Ticket purchase service - all purchase rules live here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants before any side effect
- Take payment first, then reserve seats
- Leave gateway errors to propagate unchanged
"""

import logging
from collections.abc import Iterable

from purchases.conf import load_purchase_policy
from purchases.domain import (
    InvalidPurchaseError,
    PriceTable,
    PurchasePolicy,
    PurchaseTotals,
    TicketCountsByType,
    TicketType,
    TicketTypeRequest,
    empty_ticket_counts,
)
from purchases.gateways import (
    SeatReservationGateway,
    SeatReservationService,
    TicketPaymentGateway,
    TicketPaymentService,
)

logger = logging.getLogger(__name__)


class TicketService:
    """Validates, prices and settles one purchase per call."""

    def __init__(
        self,
        payment_gateway: TicketPaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
        policy: PurchasePolicy | None = None,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway
        self._policy = policy

    @property
    def policy(self) -> PurchasePolicy:
        if self._policy is not None:
            return self._policy
        return load_purchase_policy()

    def purchase_tickets(self, account_id: int, *ticket_type_requests: TicketTypeRequest) -> None:
        """Charge the account and reserve seats for the requested tickets.

        Raises:
            InvalidPurchaseError: If the account id or requests break the
                purchase policy. Neither gateway is called in that case.
        """
        try:
            _validate_account_id(account_id)
            policy = self.policy
            counts = _validate_purchase(ticket_type_requests, policy)
        except InvalidPurchaseError as exc:
            logger.warning(
                "Purchase rejected",
                extra={"account_id": account_id, "code": exc.code.value},
            )
            raise

        totals = _calculate_totals(counts, policy.prices)
        self._payment_gateway.make_payment(account_id, totals.total_amount)
        self._seat_reservation_gateway.reserve_seat(account_id, totals.total_seats)
        logger.info(
            "Purchase completed",
            extra={
                "account_id": account_id,
                "amount": totals.total_amount,
                "seats": totals.total_seats,
            },
        )


def build_ticket_service() -> TicketService:
    """Return a TicketService wired to the default providers."""
    return TicketService(
        payment_gateway=TicketPaymentService(),
        seat_reservation_gateway=SeatReservationService(),
    )


def _validate_account_id(account_id: int) -> None:
    # Zero is accepted; only negatives and non-integers are rejected.
    if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id < 0:
        raise InvalidPurchaseError.invalid_account_id()


def _validate_purchase(
    ticket_type_requests: tuple,
    policy: PurchasePolicy,
) -> TicketCountsByType:
    if len(ticket_type_requests) == 0:
        raise InvalidPurchaseError.no_tickets_requested()

    counts = _count_tickets_by_type(ticket_type_requests)

    accompanied = counts[TicketType.INFANT] > 0 or counts[TicketType.CHILD] > 0
    if accompanied and counts[TicketType.ADULT] < 1:
        raise InvalidPurchaseError.adult_ticket_required()

    if _total_ticket_count(counts) > policy.max_tickets_per_purchase:
        raise InvalidPurchaseError.too_many_tickets(policy.max_tickets_per_purchase)

    return counts


def _count_tickets_by_type(ticket_type_requests: Iterable[object]) -> TicketCountsByType:
    counts = empty_ticket_counts()
    for request in ticket_type_requests:
        if not isinstance(request, TicketTypeRequest):
            logger.warning(
                "Ignoring entry that is not a ticket request",
                extra={"entry_type": type(request).__name__},
            )
            continue
        counts[request.ticket_type] += request.no_of_tickets
    return counts


def _total_ticket_count(counts: TicketCountsByType) -> int:
    return sum(counts.values())


def _total_amount_to_pay(counts: TicketCountsByType, prices: PriceTable) -> int:
    return sum(
        no_of_tickets * prices.price_of(ticket_type)
        for ticket_type, no_of_tickets in counts.items()
    )


def _seats_to_reserve(counts: TicketCountsByType) -> int:
    # Infants sit on an adult's lap.
    return sum(
        no_of_tickets
        for ticket_type, no_of_tickets in counts.items()
        if ticket_type is not TicketType.INFANT
    )


def _calculate_totals(counts: TicketCountsByType, prices: PriceTable) -> PurchaseTotals:
    return PurchaseTotals(
        total_amount=_total_amount_to_pay(counts, prices),
        total_seats=_seats_to_reserve(counts),
    )
