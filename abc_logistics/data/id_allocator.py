from __future__ import annotations

from typing import Optional

from ..config import get_config
from ..logging import get_logger
from .interface import KeyValueStorage
from .models import format_item_id


class IdAllocator:
    """Issues sequential item codes (``ABC-0001``, ``ABC-0002``, ...).

    The counter lives in storage as text and is never reused, even for
    deleted items. The instance also remembers the counter it last wrote, so
    ids keep advancing for the session even when persisting fails; only a
    fresh allocator may reread a stale counter.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: Optional[str] = None,
        prefix: Optional[str] = None,
    ) -> None:
        config = get_config()
        self.storage = storage
        self.key = key or config.counter_key
        self.prefix = prefix or config.id_prefix
        self.logger = get_logger(__name__)
        self._next: Optional[int] = None

    def peek(self) -> int:
        """Return the counter that the next call to next_id() will use."""
        raw = self.storage.get_item(self.key)
        try:
            value = int((raw or "").strip() or 1)
        except ValueError:
            self.logger.warning(f"Ignoring unreadable id counter {raw!r}; restarting at 1")
            value = 1
        return max(value, self._next or 1, 1)

    def next_id(self) -> str:
        counter = self.peek()
        self._write(counter + 1)
        return format_item_id(self.prefix, counter)

    def reset(self, value: int) -> None:
        self._write(value)

    def _write(self, value: int) -> None:
        self._next = value
        try:
            self.storage.set_item(self.key, str(value))
        except OSError as e:
            self.logger.warning(f"Id counter not persisted ({e}); a reload may repeat ids")

    def advance_past(self, item_ids) -> None:
        """Move the counter beyond any numeric suffix in ``item_ids`` that uses this prefix."""
        highest = 0
        for item_id in item_ids:
            prefix, _, number = item_id.rpartition("-")
            if prefix == self.prefix and number.isdigit():
                highest = max(highest, int(number))
        if highest >= self.peek():
            self._write(highest + 1)
