from __future__ import annotations

import sqlite3
from typing import List, Optional

from ...config import get_config
from ...logging import get_logger
from ..interface import ItemBackend, KeyValueStorage, PersistenceError
from ..models import InventoryItem, name_key

_SCHEMA = """
CREATE TABLE IF NOT EXISTS inventory (
  id         TEXT PRIMARY KEY,
  name       TEXT NOT NULL,
  category   TEXT NOT NULL,
  quantity   REAL NOT NULL DEFAULT 0,
  unitPrice  REAL NOT NULL DEFAULT 0,
  totalValue REAL NOT NULL DEFAULT 0,
  dateAdded  TEXT NOT NULL,
  status     TEXT NOT NULL DEFAULT 'In Stock'
)
"""

_COLUMNS = "id, name, category, quantity, unitPrice, totalValue, dateAdded, status"
_DUMP_PREAMBLE = "BEGIN TRANSACTION;"


class SqliteItemBackend(ItemBackend):
    """
    Relational implementation on an in-memory SQLite database.
    - The database is exported as a SQL dump under one storage key and
      rebuilt from it on load.
    - Name lookups go through a `name_key()` SQL function so they agree with
      the Python-side comparison used by the reconciler.
    """

    def __init__(self, storage: KeyValueStorage, key: Optional[str] = None) -> None:
        self.storage = storage
        self.key = key or get_config().items_key
        self.logger = get_logger(__name__)
        self._conn = self._connect()
        self._conn.execute(_SCHEMA)

    # ---------- connection helpers ----------

    @staticmethod
    def _connect() -> sqlite3.Connection:
        conn = sqlite3.connect(":memory:")
        conn.row_factory = sqlite3.Row
        conn.create_function("name_key", 1, name_key, deterministic=True)
        return conn

    def _restore(self, dump: str) -> sqlite3.Connection:
        if not dump.lstrip().startswith(_DUMP_PREAMBLE):
            raise sqlite3.DatabaseError("stored value is not an inventory dump")
        conn = self._connect()
        try:
            conn.executescript(dump)
            conn.execute(_SCHEMA)
            # Validate every row now so a foreign table or bad row surfaces here, not later
            for row in conn.execute(f"SELECT {_COLUMNS} FROM inventory"):
                self._row_to_item(row)
        except (sqlite3.Error, ValueError):
            conn.close()
            raise
        return conn

    @staticmethod
    def _row_to_item(row: sqlite3.Row) -> InventoryItem:
        return InventoryItem.from_record(dict(row))

    # ---------- interface implementation ----------

    def load(self) -> None:
        raw = self.storage.get_item(self.key)
        conn = None
        if raw:
            try:
                conn = self._restore(raw)
            except (sqlite3.Error, ValueError) as e:
                self.logger.warning(f"Stored database under {self.key!r} is corrupt, starting fresh: {e}")
        if conn is None:
            conn = self._connect()
            conn.execute(_SCHEMA)
        old, self._conn = self._conn, conn
        old.close()

    def list_items(self) -> List[InventoryItem]:
        rows = self._conn.execute(f"SELECT {_COLUMNS} FROM inventory ORDER BY rowid").fetchall()
        return [self._row_to_item(row) for row in rows]

    def find_by_name(self, name: str) -> Optional[InventoryItem]:
        row = self._conn.execute(
            f"SELECT {_COLUMNS} FROM inventory WHERE name_key(name) = ? ORDER BY rowid LIMIT 1",
            (name_key(name),),
        ).fetchone()
        return self._row_to_item(row) if row else None

    def insert(self, item: InventoryItem) -> None:
        self._conn.execute(
            f"INSERT INTO inventory ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            (item.id, item.name, item.category, item.quantity,
             item.unit_price, item.total_value, item.date_added, item.status),
        )
        self._conn.commit()

    def delete(self, item_id: str) -> bool:
        cur = self._conn.execute("DELETE FROM inventory WHERE id = ?", (item_id,))
        self._conn.commit()
        return cur.rowcount > 0

    def update_quantity(self, item_id: str, quantity: float) -> None:
        self._conn.execute(
            "UPDATE inventory SET quantity = ?, totalValue = ? * unitPrice WHERE id = ?",
            (quantity, quantity, item_id),
        )
        self._conn.commit()

    def save(self) -> None:
        try:
            dump = "\n".join(self._conn.iterdump())
            self.storage.set_item(self.key, dump)
        except (OSError, sqlite3.Error) as e:
            raise PersistenceError(f"Could not write database to {self.key!r}: {e}") from e
