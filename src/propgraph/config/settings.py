from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict

from dynaconf import Dynaconf

# ---------------------------------------------------------------------
# Defaults (overridable through PROPGRAPH_* environment variables)
# ---------------------------------------------------------------------

DEFAULTS: Dict[str, Any] = {
    # Raise NotFoundError on dangling edge/node references during traversal
    "STRICT_REFERENCES": False,
    # Emit a warning for every dangling reference skipped during traversal
    "LOG_SKIPS": True,
    # Level applied to the "propgraph" logger by configure_logging()
    "LOG_LEVEL": "WARNING",
}


# ---------------------------------------------------------------------
# Query evaluation
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class QueryConfig:
    """
    Controls how a query tree resolves edge and node references
    while traversing the graph.

    With strict_references, a NotFoundError raised inside one branch
    can leave a branched query partly advanced: earlier sibling
    branches have already applied the operation, later ones have not.
    """

    strict_references: bool = False
    log_skips: bool = True


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class PropgraphConfig:
    """
    Root configuration object for propgraph.

    Passed explicitly to queries; there is no module-level instance.
    """

    query: QueryConfig = field(default_factory=QueryConfig)
    log_level: str = "WARNING"


def load_config(**overrides: Any) -> PropgraphConfig:
    """
    Build a PropgraphConfig from DEFAULTS, PROPGRAPH_* environment
    variables and keyword overrides, in increasing precedence.
    """
    settings = Dynaconf(
        envvar_prefix="PROPGRAPH",
        load_dotenv=False,
        settings_files=[],
    )
    for name, value in DEFAULTS.items():
        if not settings.exists(name):
            settings.set(name, value)
    for name, value in overrides.items():
        settings.set(name.upper(), value)

    return PropgraphConfig(
        query=QueryConfig(
            strict_references=settings.as_bool("STRICT_REFERENCES"),
            log_skips=settings.as_bool("LOG_SKIPS"),
        ),
        log_level=str(settings.get("LOG_LEVEL")).upper(),
    )


def configure_logging(config: PropgraphConfig) -> logging.Logger:
    logger = logging.getLogger("propgraph")
    logger.setLevel(config.log_level)
    return logger
