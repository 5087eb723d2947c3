"""Static development timeline shown on the ``/roadmap`` ("system logs") page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

STATUS_COMPLETED = "COMPLETED"
STATUS_UPCOMING = "UPCOMING"


@dataclass(frozen=True)
class Milestone:
    status: str
    title: str
    desc: str
    tech: Tuple[str, ...]

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED


TIMELINE: Tuple[Milestone, ...] = (
    Milestone(
        STATUS_COMPLETED,
        "Phase 1: The Engine (Genesis)",
        "File-based storage system (users.jsonl) and basic append-only logic.",
        ("FS Module", "JSON Lines"),
    ),
    Milestone(
        STATUS_COMPLETED,
        "Phase 2: Indexing Architecture",
        "RAM-based indexing. Moved from linear search to indexed lookups.",
        ("RAM Map", "File Positions", "Buffer Reading"),
    ),
    Milestone(
        STATUS_COMPLETED,
        "Phase 3: The Algorithm (AVL Tree)",
        "Self-balancing AVL tree so sorted inserts no longer skew the index.",
        ("AVL Algorithm", "Rotations", "Iterative Logic"),
    ),
    Milestone(
        STATUS_COMPLETED,
        "Phase 4: High-Performance API",
        "REST API with microsecond latency measurement.",
        ("REST", "Precision Timing", "Env Config"),
    ),
    Milestone(
        STATUS_COMPLETED,
        "Phase 5: The Interface (Dashboard)",
        "Dashboard with server-side timing and debounced pagination.",
        ("Web UI", "Debouncing"),
    ),
    Milestone(
        STATUS_COMPLETED,
        "Phase 6: Identity Evolution & Writes",
        "String (UUID) identifiers, create-user writes and the create dialog.",
        ("UUIDs", "String AVL Logic", "Write Ops"),
    ),
    Milestone(
        STATUS_COMPLETED,
        "Phase 7: The Purge (Deletion)",
        "Soft delete with AVL rebalancing and a confirmed delete flow in the UI.",
        ("AVL Deletion", "Rebalancing", "Soft Delete"),
    ),
    Milestone(
        STATUS_UPCOMING,
        "Phase 8: Garbage Collection (Vacuum)",
        "Background compaction that removes soft-deleted rows from disk.",
        ("Compaction", "Vacuuming", "Cron Jobs"),
    ),
    Milestone(
        STATUS_UPCOMING,
        "Phase 9: Binary Optimization",
        "Raw binary records instead of JSON text.",
        ("Buffers", "Binary Packing", "Bitwise Ops"),
    ),
    Milestone(
        STATUS_UPCOMING,
        "Phase 10: Secondary Indexing",
        "Search by name or email, not just id.",
        ("Multi-Index", "B-Tree Concept"),
    ),
)


def completed_count(timeline: Tuple[Milestone, ...] = TIMELINE) -> int:
    return sum(1 for item in timeline if item.is_completed)


def progress_label(timeline: Tuple[Milestone, ...] = TIMELINE) -> str:
    return f"{completed_count(timeline)}/{len(timeline)} phases complete"


def milestones_by_status(status: str, timeline: Tuple[Milestone, ...] = TIMELINE) -> List[Milestone]:
    return [item for item in timeline if item.status == status]


__all__ = [
    "Milestone",
    "STATUS_COMPLETED",
    "STATUS_UPCOMING",
    "TIMELINE",
    "completed_count",
    "milestones_by_status",
    "progress_label",
]
