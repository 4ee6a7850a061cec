"""In-memory persistence adapters."""

from apps.oauth_broker.infrastructure.persistence_memory.state_store_memory import (
    InMemoryStateStore,
)
from apps.oauth_broker.infrastructure.persistence_memory.sweeper import StateSweeper

__all__ = ["InMemoryStateStore", "StateSweeper"]
