from purchases.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway
from purchases.gateways.thirdparty import SeatReservationService, TicketPaymentService

__all__ = [
    "TicketPaymentGateway",
    "SeatReservationGateway",
    "TicketPaymentService",
    "SeatReservationService",
]
