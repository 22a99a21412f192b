"""Coerce raw webhook payloads into validated models.

Nothing in here raises on bad data: a missing container yields an empty
list and an entry that fails validation is logged and dropped, so one
broken source never blocks the others.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from ..models.broadcast import Order
from ..models.campaign import Campaign

logger = logging.getLogger(__name__)

Payload = Mapping[str, Any] | None


def _entries(payload: Payload, key: str) -> list[Any]:
    """Return payload[key] as a list.

    Stations send orders as an object keyed by order id; its values are
    taken in insertion order.
    """
    if not isinstance(payload, Mapping):
        return []
    container = payload.get(key)
    if isinstance(container, Mapping):
        return list(container.values())
    if isinstance(container, list):
        return container
    if container is not None:
        logger.warning("Ignoring %r: expected list or object, got %s", key, type(container).__name__)
    return []


def _validate_all(entries: Iterable[Any], model: type[BaseModel], kind: str) -> list[Any]:
    valid = []
    for i, raw in enumerate(entries):
        try:
            valid.append(model.model_validate(raw))
        except ValidationError as e:
            logger.warning("Dropping %s #%d: %d validation error(s)", kind, i, e.error_count())
    return valid


def coerce_orders(payload: Payload) -> list[Order]:
    """Validated orders of one station payload ({orders: [...] | {...}})."""
    return _validate_all(_entries(payload, "orders"), Order, "order")


def coerce_campaigns(payload: Payload) -> list[Campaign]:
    """Validated campaigns of one ad-platform payload ({campaigns: [...]})."""
    return _validate_all(_entries(payload, "campaigns"), Campaign, "campaign")


def orders_from_payloads(payloads: Iterable[Payload] | None) -> list[Order]:
    """Orders of several station payloads, in payload order. None payloads add nothing."""
    orders: list[Order] = []
    for payload in payloads or []:
        orders.extend(coerce_orders(payload))
    return orders
