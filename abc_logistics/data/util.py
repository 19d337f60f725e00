from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from ..config import get_config
from .backends import JsonItemBackend, SqliteItemBackend
from .interface import ItemBackend, KeyValueStorage
from .storage import FileKeyValueStorage


def resolve_data_dir(data_dir: str | Path) -> Path:
    """Resolve a relative data directory against the repository root."""
    path = Path(data_dir)
    if path.is_absolute():
        return path

    # Look up the directory tree for pyproject.toml
    current = Path.cwd()
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            return parent / path
    return current / path


def get_storage(data_dir: Optional[str | Path] = None) -> KeyValueStorage:
    if data_dir is None:
        data_dir = get_config().data_dir
    return FileKeyValueStorage(resolve_data_dir(data_dir))


def get_item_backend(
    kind: Literal["sqlite", "json"] = "sqlite",
    storage: Optional[KeyValueStorage] = None,
    key: Optional[str] = None,
) -> ItemBackend:
    storage = storage if storage is not None else get_storage()
    if kind == "sqlite":
        return SqliteItemBackend(storage, key=key)
    if kind == "json":
        return JsonItemBackend(storage, key=key)
    raise ValueError(f"Unknown item backend kind: {kind}")
