"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from purchases.gateways import SeatReservationGateway, TicketPaymentGateway
from purchases.services import TicketService


@pytest.fixture
def payment_gateway() -> MagicMock:
    return MagicMock(spec=TicketPaymentGateway)


@pytest.fixture
def seat_reservation_gateway() -> MagicMock:
    return MagicMock(spec=SeatReservationGateway)


@pytest.fixture
def ticket_service(payment_gateway, seat_reservation_gateway) -> TicketService:
    return TicketService(
        payment_gateway=payment_gateway,
        seat_reservation_gateway=seat_reservation_gateway,
    )


@pytest.fixture
def account_id() -> int:
    return 1
