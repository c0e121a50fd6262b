"""JSON-based repository for assembled game data."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import TypeAdapter

from akdata.domain.models import GameData

_NAME_PATTERN = re.compile(r"^[\w.-]+$")


class JsonSnapshotRepository:
    """Named ``GameData`` snapshots stored as ``gamedata_<name>.json``."""

    prefix = "gamedata_"
    suffix = ".json"

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)
        self._adapter: TypeAdapter[GameData] = TypeAdapter(GameData)

    def _path_for(self, name: str) -> Path:
        # names end up in a file name, so no separators
        if not _NAME_PATTERN.match(name):
            raise ValueError(f"invalid snapshot name {name!r}")
        return self.base_path / f"{self.prefix}{name}{self.suffix}"

    def save(self, game_data: GameData, name: str) -> Path:
        """Write ``game_data`` under ``name``, replacing any older snapshot."""

        path = self._path_for(name)
        path.write_bytes(self._adapter.dump_json(game_data, indent=2))
        return path

    def load(self, name: str) -> GameData:
        return self._adapter.validate_json(self._path_for(name).read_bytes())

    def list_snapshots(self) -> list[str]:
        """Names of every stored snapshot, sorted."""

        return sorted(
            path.name.removeprefix(self.prefix).removesuffix(self.suffix)
            for path in self.base_path.glob(f"{self.prefix}*{self.suffix}")
        )

    def delete(self, name: str) -> None:
        self._path_for(name).unlink(missing_ok=True)
