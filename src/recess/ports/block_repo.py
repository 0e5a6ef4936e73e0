"""Block repository interface."""

from typing import Protocol

from recess.core.timeline import ActivityBlock


class BlockRepository(Protocol):
    """Interface for loading and storing a user's timetable."""

    def fetch_blocks(self) -> list[ActivityBlock]:
        """Fetch every stored block, dated and recurring."""
        ...

    def save_blocks(self, blocks: list[ActivityBlock]) -> None:
        """Append blocks to the timetable."""
        ...
