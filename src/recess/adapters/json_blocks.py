"""JSON file block storage adapter."""

import json
import logging
from pathlib import Path

from recess.core.breaks import SuggestedBreak
from recess.core.timeline import ActivityBlock

logger = logging.getLogger(__name__)


class BlockStoreError(Exception):
    """Raised when the block file cannot be read or parsed."""

    pass


class JsonBlockStore:
    """
    File-based block storage.

    Implements BlockRepository protocol. The file holds a JSON list of
    schedule rows.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _read_rows(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            raise BlockStoreError(f"Invalid JSON in {self.path}: {e}") from e
        if not isinstance(data, list):
            raise BlockStoreError(f"Expected a list of blocks in {self.path}")
        return data

    def fetch_blocks(self) -> list[ActivityBlock]:
        """Fetch every stored block, dated and recurring."""
        blocks = []
        for row in self._read_rows():
            if not isinstance(row, dict):
                logger.warning(f"Skipping malformed block {row!r}: not an object")
                continue
            try:
                blocks.append(ActivityBlock.from_row(row))
            except (KeyError, ValueError, TypeError) as e:
                logger.warning(f"Skipping malformed block {row!r}: {e}")
        return blocks

    def save_blocks(self, blocks: list[ActivityBlock]) -> None:
        """Append blocks to the file."""
        rows = self._read_rows()
        rows.extend(b.to_row() for b in blocks)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(rows, indent=2))

    def add_breaks(self, breaks: list[SuggestedBreak]) -> None:
        """Persist accepted break suggestions as dated break blocks."""
        self.save_blocks([b.to_block() for b in breaks])
