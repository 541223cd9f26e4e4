"""Cache of resolved kits."""

from sidekit.models import Kit


class KitCache:
    """Resolved kits keyed by the id they were resolved under.

    Owned by a KitResolver; a fresh cache means fresh lookups.
    """

    def __init__(self) -> None:
        self._kits: dict[str, Kit] = {}

    def get(self, kit_id: str) -> Kit | None:
        return self._kits.get(kit_id)

    def set(self, kit_id: str, kit: Kit) -> None:
        self._kits[kit_id] = kit

    def clear(self) -> None:
        self._kits.clear()

    def __contains__(self, kit_id: object) -> bool:
        return kit_id in self._kits

    def __len__(self) -> int:
        return len(self._kits)
