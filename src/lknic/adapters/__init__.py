"""Adapters implementing the NIC component ports."""

from .time_colombo import (
    COLOMBO_TZ,
    ColomboTimeAdapter,
    FrozenTimeAdapter,
    create_time_adapter,
)

__all__ = [
    "COLOMBO_TZ",
    "ColomboTimeAdapter",
    "FrozenTimeAdapter",
    "create_time_adapter",
]
