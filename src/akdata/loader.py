"""Local loading of the exported ``gamedata`` directory.

Every table is read and decoded on a worker thread.  Loading is
all-or-nothing: the first failure cancels the pending reads and is raised as
:class:`~akdata.domain.errors.DataLoadError`.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from functools import cache
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from akdata.domain.errors import DataLoadError
from akdata.schemas import TABLE_FILES, RawTableSet

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4


@cache
def _adapter(table: str) -> TypeAdapter[Any]:
    _, table_type = TABLE_FILES[table]
    return TypeAdapter(table_type)


def load_table(gamedata_dir: Path, table: str) -> Any:
    """Read and decode a single table of ``gamedata_dir``."""

    relative_path, _ = TABLE_FILES[table]
    path = gamedata_dir / relative_path
    try:
        payload = path.read_bytes()
        return _adapter(table).validate_json(payload)
    except (OSError, ValidationError) as exc:
        raise DataLoadError(table, path, str(exc)) from exc


def load_tables(gamedata_dir: Path | str, *, max_workers: int = DEFAULT_WORKERS) -> RawTableSet:
    """Load every table of ``gamedata_dir`` into a :class:`RawTableSet`."""

    gamedata_dir = Path(gamedata_dir)
    decoded: dict[str, Any] = {}
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(load_table, gamedata_dir, table): table for table in TABLE_FILES
        }
        for future in as_completed(futures):
            try:
                decoded[futures[future]] = future.result()
            except DataLoadError:
                for pending in futures:
                    pending.cancel()
                raise

    logger.info("Loaded %d tables from %s", len(decoded), gamedata_dir)
    return RawTableSet(**decoded)
