"""Purchase policy loaded from Django settings.

Settings are read on every call so that overrides take effect immediately.
"""

from collections.abc import Mapping

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from purchases.domain import PriceTable, PurchasePolicy, TicketType
from purchases.domain.models import DEFAULT_MAX_TICKETS_PER_PURCHASE, DEFAULT_TICKET_PRICES


def load_purchase_policy() -> PurchasePolicy:
    """Build the purchase policy from TICKET_PRICES and MAX_TICKETS_PER_PURCHASE.

    Raises:
        ImproperlyConfigured: If TICKET_PRICES is not a mapping or names an
            unknown ticket type, or if either setting breaks a policy invariant.
    """
    configured = getattr(settings, "TICKET_PRICES", None)
    if configured is None:
        prices = dict(DEFAULT_TICKET_PRICES)
    elif not isinstance(configured, Mapping):
        raise ImproperlyConfigured("TICKET_PRICES must be a mapping of ticket type to price")
    else:
        prices = {}
        for name, price in configured.items():
            try:
                prices[TicketType(name)] = price
            except (ValueError, TypeError):
                raise ImproperlyConfigured(f"TICKET_PRICES has unknown ticket type {name!r}")

    max_tickets = getattr(
        settings, "MAX_TICKETS_PER_PURCHASE", DEFAULT_MAX_TICKETS_PER_PURCHASE
    )
    try:
        return PurchasePolicy(
            prices=PriceTable(prices=prices),
            max_tickets_per_purchase=max_tickets,
        )
    except ValueError as exc:
        raise ImproperlyConfigured(str(exc)) from exc
