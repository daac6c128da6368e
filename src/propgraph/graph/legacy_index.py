from __future__ import annotations

from typing import Any, Dict


class LegacyIndex:
    """
    Auxiliary index owned by a GraphStore.

    Its contents are managed by the host application; the store
    creates one alongside itself and otherwise leaves it alone.
    """

    def __init__(self) -> None:
        self.entries: Dict[str, Any] = {}

    def __len__(self) -> int:
        return len(self.entries)
