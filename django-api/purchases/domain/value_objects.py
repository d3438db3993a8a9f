"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum


class TicketType(Enum):
    """Closed set of ticket classifications."""

    INFANT = "INFANT"
    CHILD = "CHILD"
    ADULT = "ADULT"


@dataclass(frozen=True)
class TicketTypeRequest:
    """One line item of a purchase: a ticket type and how many of it."""

    ticket_type: TicketType
    no_of_tickets: int

    def __post_init__(self) -> None:
        if isinstance(self.ticket_type, str) and self.ticket_type in TicketType.__members__:
            object.__setattr__(self, "ticket_type", TicketType[self.ticket_type])
        if not isinstance(self.ticket_type, TicketType):
            raise TypeError("ticket_type must be INFANT, CHILD, or ADULT")
        if isinstance(self.no_of_tickets, bool) or not isinstance(self.no_of_tickets, int):
            raise TypeError("no_of_tickets must be an integer")
        if self.no_of_tickets < 0:
            raise ValueError("no_of_tickets cannot be negative")
