"""
Configuration layer for propgraph.

Configuration is:
- Explicit (passed to queries, not global)
- Typed (frozen dataclasses)
- Overridable from PROPGRAPH_* environment variables via load_config()
"""

from propgraph.config.settings import (
    DEFAULTS,
    QueryConfig,
    PropgraphConfig,
    load_config,
    configure_logging,
)

__all__ = [
    "DEFAULTS",
    "QueryConfig",
    "PropgraphConfig",
    "load_config",
    "configure_logging",
]
