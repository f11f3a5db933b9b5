"""Ordering bounded context — order intake, order ledger and shopping cart.

Handles the path from a raw checkout submission to a durable, uniquely
numbered order record, the order lifecycle, and the client-side cart that
produces checkout submissions.
"""

import structlog
from protean.domain import Domain

# Orders persist through OrderStore; protean's adapters stay in memory.
ordering = Domain(
    name="ordering",
    config={
        "databases": {"default": {"provider": "memory"}},
        "event_store": {"provider": "memory"},
        "brokers": {"default": {"provider": "inline"}},
    },
)

logger = structlog.get_logger(__name__)
