"""
Local file-based store for the place collection.
The whole collection is kept as one JSON array and rewritten on every save.
"""
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from catalog.core.config import settings
from catalog.core.errors import StorageError
from catalog.core.logger import logs
from catalog.models.places_model import Place

places_adapter = TypeAdapter(Optional[List[Place]])


class PlacesStore:
    """Reads and writes the places snapshot file."""

    def __init__(self, path: str | os.PathLike | None = None):
        self.path = Path(path or settings.PLACES_FILE)

    def load(self) -> list[Place]:
        """
        Load the snapshot.
        A missing, empty or undecodable file yields an empty list; only a
        file that exists but cannot be read raises StorageError.
        """
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            logs.log(logging.INFO, f"No snapshot at {self.path}, starting empty")
            return []
        except OSError as e:
            logs.log(logging.ERROR, f"Failed to open {self.path}: {str(e)}")
            raise StorageError("places storage is unavailable") from e

        if not raw.strip():
            logs.log(logging.INFO, f"Snapshot {self.path} is empty, starting empty")
            return []

        try:
            places = places_adapter.validate_json(raw) or []
        except SchemaError as e:
            logs.log(logging.ERROR, f"Failed to parse {self.path}, starting empty: {str(e)}")
            return []

        logs.log(logging.INFO, f"Loaded {len(places)} places from {self.path}")
        return places

    def save(self, places: list[Place]) -> None:
        """Serialize the full collection and replace the snapshot file."""
        payload = places_adapter.dump_json(list(places), indent=2)
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(payload)
                    f.write(b"\n")
                os.chmod(tmp_name, self._file_mode())
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            logs.log(logging.ERROR, f"Failed to save places to {self.path}: {str(e)}")
            raise StorageError("failed to save places") from e

        logs.log(logging.DEBUG, f"Saved {len(places)} places to {self.path}")

    def _file_mode(self) -> int:
        """Mode of the current snapshot, or the umask default for a new file."""
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
