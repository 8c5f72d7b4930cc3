"""Scene placement for bookmark nodes and batching of drag moves.

Categories sit evenly spaced on a ring around the origin, sorted by name. Each
category's bookmarks fan out in rows of four facing the ring centre. A
bookmark with a stored position other than the origin keeps it.
"""

import logging
import math
from collections import defaultdict

from src.client.bookmarks import BookmarkStore

logger = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]

MIN_RING_RADIUS = 5.5
RING_RADIUS_PER_CATEGORY = 2.2
NODES_PER_ROW = 4
COLUMN_SPACING = 1.9
ROW_SPACING = 1.8
EVEN_ROW_HEIGHT = 0.2
ODD_ROW_HEIGHT = -0.1


def group_by_category(bookmarks: list[dict]) -> list[tuple[str, list[dict]]]:
    """Group bookmarks by category, categories sorted by name."""
    groups: dict[str, list[dict]] = defaultdict(list)
    for bookmark in bookmarks:
        groups[bookmark["category"]].append(bookmark)
    return sorted(groups.items())


def stored_position(bookmark: dict) -> Vec3 | None:
    x, y, z = bookmark.get("x"), bookmark.get("y"), bookmark.get("z")
    if x is None or y is None or z is None:
        return None
    if x == 0 and y == 0 and z == 0:
        return None
    return (float(x), float(y), float(z))


def ring_radius(category_count: int) -> float:
    return max(MIN_RING_RADIUS, category_count * RING_RADIUS_PER_CATEGORY)


def compute_positions(bookmarks: list[dict]) -> dict[int, Vec3]:
    """Map bookmark id to its scene position."""
    categories = group_by_category(bookmarks)
    category_count = len(categories) or 1
    radius = ring_radius(category_count)

    positions: dict[int, Vec3] = {}
    for category_index, (_, members) in enumerate(categories):
        angle = (category_index / category_count) * math.pi * 2
        center_x = math.cos(angle) * radius
        center_z = math.sin(angle) * radius
        spin = angle + math.pi / 2

        for index, bookmark in enumerate(members):
            stored = stored_position(bookmark)
            if stored is not None:
                positions[bookmark["id"]] = stored
                continue

            row, col = divmod(index, NODES_PER_ROW)
            spread_x = (col - (NODES_PER_ROW - 1) / 2) * COLUMN_SPACING
            spread_z = row * ROW_SPACING
            rotated_x = spread_x * math.cos(spin) - spread_z * math.sin(spin)
            rotated_z = spread_x * math.sin(spin) + spread_z * math.cos(spin)
            height = EVEN_ROW_HEIGHT if row % 2 == 0 else ODD_ROW_HEIGHT
            positions[bookmark["id"]] = (center_x + rotated_x, height, center_z + rotated_z)

    return positions


class LayoutBuffer:
    """Holds drag moves locally until the gesture ends, then sends one batch.

    Moves are cheap and never touch the network; flush() submits every moved
    bookmark together with its scale and pinned state.
    """

    def __init__(self, store: BookmarkStore):
        self.store = store
        self._pending: dict[int, dict] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    def move(
        self,
        bookmark_id: int,
        position: Vec3,
        scale: float | None = None,
        pinned: bool | None = None,
    ) -> None:
        entry = self._pending.setdefault(bookmark_id, {})
        entry["position"] = tuple(position)
        if scale is not None:
            entry["scale"] = scale
        if pinned is not None:
            entry["pinned"] = pinned

    def discard(self) -> None:
        self._pending.clear()

    def positions(self, bookmarks: list[dict]) -> dict[int, Vec3]:
        """Computed positions with unsaved moves laid on top."""
        positions = compute_positions(bookmarks)
        for bookmark_id, entry in self._pending.items():
            if bookmark_id in positions:
                positions[bookmark_id] = entry["position"]
        return positions

    def build_batch(self) -> list[dict]:
        """Pending moves with the scale and pinned state the server holds.

        Bookmarks the current list no longer contains are left out.
        """
        incomplete = any(
            "scale" not in entry or "pinned" not in entry for entry in self._pending.values()
        )
        current = {}
        if incomplete:
            current = {bookmark["id"]: bookmark for bookmark in self.store.bookmarks()}

        batch = []
        for bookmark_id, entry in self._pending.items():
            known = current.get(bookmark_id)
            if known is None and ("scale" not in entry or "pinned" not in entry):
                logger.warning(f"Dropping layout move for unknown bookmark {bookmark_id}")
                continue
            x, y, z = entry["position"]
            batch.append(
                {
                    "id": bookmark_id,
                    "x": x,
                    "y": y,
                    "z": z,
                    "scale": entry["scale"] if "scale" in entry else known["scale"],
                    "pinned": entry["pinned"] if "pinned" in entry else known["pinned"],
                }
            )
        return batch

    def flush(self) -> int:
        """Send pending moves in one request; they are kept if it fails."""
        if not self._pending:
            return 0
        batch = self.build_batch()
        if batch:
            self.store.save_layout(batch)
        self._pending.clear()
        logger.debug(f"Flushed layout batch of {len(batch)} bookmarks")
        return len(batch)
