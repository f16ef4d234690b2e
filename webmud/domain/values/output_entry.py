"""Output entry value object."""

from dataclasses import dataclass
from enum import Enum


class EntryKind(str, Enum):
    """Visual channel an entry belongs to."""

    RECEIVED = "received"
    ECHO = "echo"
    NOTICE = "notice"


@dataclass(frozen=True, slots=True)
class OutputEntry:
    """A rendered entry in the output buffer.

    ``sequence_id`` is the stable identity a renderer uses to remove
    exactly this element once it is evicted.
    """

    sequence_id: int
    rendered_text: str
    kind: EntryKind = EntryKind.RECEIVED

    @property
    def element_id(self) -> str:
        """DOM-style element id of the rendering envelope."""
        return f"msg{self.sequence_id}"
