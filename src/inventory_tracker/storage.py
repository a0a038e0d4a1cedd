"""Key-value text storage backends for the record stores.

Every backend exposes ``get(key) -> str | None`` and ``set(key, text)``.
Values are opaque text; the stores decide what goes in them.
"""

import json
import logging
import os
import tempfile
from contextlib import contextmanager
from typing import Dict, Optional

import psycopg2

from .config import StorageConfig

logger = logging.getLogger(__name__)

DEFAULT_DSN = "dbname=postgres user=postgres host=localhost password=postgres"


class MemoryStorage:
    """Dict-backed storage; contents live as long as the object."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, text: str):
        self._data[key] = text


class FileStorage:
    """Single JSON document on disk mapping keys to text values.

    Writes go to a temp file in the same directory and are moved into place
    with ``os.replace``, so a crash never leaves a half-written document.
    """

    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            raw = f.read()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Storage file %s is not valid JSON; treating it as empty", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold an object; treating it as empty", self.path)
            return {}
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return None if value is None else str(value)

    def set(self, key: str, text: str):
        data = self._read_all()
        data[key] = text
        folder = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(folder, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=folder, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise


class PostgresStorage:
    """Key-value rows in a Postgres table, one row per key."""

    def __init__(self, dsn: Optional[str] = None, table: str = "kv_store"):
        self.dsn = dsn or os.environ.get("POSTGRES_DSN") or DEFAULT_DSN
        if not table.replace("_", "").isalnum():
            raise ValueError(f"Invalid table name: {table!r}")
        self.table = table

    @contextmanager
    def _conn(self):
        conn = psycopg2.connect(self.dsn)
        try:
            yield conn
        finally:
            conn.close()

    def init_schema(self):
        """Create the key-value table if it does not exist yet."""
        with self._conn() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"""
                    CREATE TABLE IF NOT EXISTS {self.table} (
                      key TEXT PRIMARY KEY,
                      value TEXT NOT NULL,
                      updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
                    )
                    """
                )
            conn.commit()

    def get(self, key: str) -> Optional[str]:
        with self._conn() as conn:
            with conn.cursor() as cur:
                cur.execute(f"SELECT value FROM {self.table} WHERE key = %s", (key,))
                row = cur.fetchone()
        return None if row is None else row[0]

    def set(self, key: str, text: str):
        with self._conn() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"""
                    INSERT INTO {self.table} (key, value, updated_at) VALUES (%s, %s, now())
                    ON CONFLICT (key) DO UPDATE SET
                      value = EXCLUDED.value,
                      updated_at = EXCLUDED.updated_at
                    """,
                    (key, text),
                )
            conn.commit()


def make_storage(cfg: StorageConfig):
    """Build the storage backend named by ``cfg.backend``."""
    backend = (cfg.backend or "").lower()
    if backend == "memory":
        return MemoryStorage()
    if backend == "file":
        if not cfg.path:
            raise ValueError("File storage requires a path")
        return FileStorage(cfg.path)
    if backend == "postgres":
        return PostgresStorage(cfg.dsn, cfg.table)
    raise ValueError(f"Unknown storage backend: {cfg.backend!r}")
