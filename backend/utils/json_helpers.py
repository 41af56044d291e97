import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class DataSourceError(Exception):
    """A static data file could not be turned into a list of records."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def read_json_array(path: Path) -> list:
    """Read a UTF-8 JSON file whose top level must be an array."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise DataSourceError(path, f"cannot read file ({e.strerror or e})") from e
    except UnicodeDecodeError as e:
        raise DataSourceError(
            path, f"not valid UTF-8 (byte {e.start}: {e.reason})"
        ) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DataSourceError(
            path, f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}"
        ) from e

    if not isinstance(data, list):
        raise DataSourceError(
            path, f"expected a JSON array, got {type(data).__name__}"
        )
    logger.debug("Read %d entries from %s", len(data), path)
    return data
