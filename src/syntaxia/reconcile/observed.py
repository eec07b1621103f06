"""
Observed State

Snapshot of a guild fetched at the start of a reconciliation pass. The driver
owns it and hands it down explicitly; reconcilers record the resources they
create so later lookups in the same pass see them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional


class ResourceKind(Enum):
    CATEGORY = "category"
    TEXT = "text"
    OTHER = "other"


@dataclass(frozen=True)
class ObservedResource:
    id: int
    kind: ResourceKind
    name: str
    parent_id: Optional[int] = None

    def is_category(self) -> bool:
        return self.kind is ResourceKind.CATEGORY

    def is_text_channel(self) -> bool:
        return self.kind is ResourceKind.TEXT


@dataclass
class ObservedGuildState:
    name: str
    icon_url: Optional[str] = None
    resources: Dict[int, ObservedResource] = field(default_factory=dict)

    def record(self, resource: ObservedResource) -> None:
        """Add a resource created during the current pass."""
        self.resources[resource.id] = resource

    def in_id_order(self) -> Iterator[ObservedResource]:
        for resource_id in sorted(self.resources):
            yield self.resources[resource_id]

    def __len__(self) -> int:
        return len(self.resources)
