"""Output buffer entity - bounded scrollback of rendered entries."""

from collections import deque
from dataclasses import dataclass, field

from ..ports import OutputObserver, SanitizerPort
from ..values import EntryKind, OutputEntry

# Business rules
DEFAULT_MSG_LIMIT = 50

ENVELOPE_TEMPLATE = '<span id="msg{sequence_id}">{text}</span>'


@dataclass
class OutputBuffer:
    """Bounded output log for the session.

    Pure domain logic for buffering rendered output.
    No async, no transport - just data management.

    At most ``msg_limit`` entries are retained. Each append past capacity
    evicts exactly the single oldest entry. Status lines live on a
    separate channel and are never evicted.
    """

    sanitizer: SanitizerPort
    msg_limit: int = DEFAULT_MSG_LIMIT
    _entries: deque[OutputEntry] = field(default_factory=deque)
    _statuses: list[str] = field(default_factory=list)
    _observers: list[OutputObserver] = field(default_factory=list)
    _next_sequence_id: int = 0

    def __post_init__(self) -> None:
        if self.msg_limit < 1:
            raise ValueError("msg_limit must be at least 1")

    @property
    def next_sequence_id(self) -> int:
        """Identity the next appended entry will receive."""
        return self._next_sequence_id

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def subscribe(self, observer: OutputObserver) -> None:
        """Register an observer for append/evict/status events."""
        self._observers.append(observer)

    def append(self, text: str, kind: EntryKind = EntryKind.RECEIVED) -> OutputEntry:
        """Sanitize, wrap and append ``text``, evicting the oldest past the limit."""
        clean = self.sanitizer.sanitize(text)
        entry = OutputEntry(
            sequence_id=self._next_sequence_id,
            rendered_text=ENVELOPE_TEMPLATE.format(
                sequence_id=self._next_sequence_id, text=clean
            ),
            kind=kind,
        )
        self._next_sequence_id += 1
        self._entries.append(entry)
        for observer in self._observers:
            observer.on_append(entry)

        # 1-in-1-out once at capacity
        if len(self._entries) > self.msg_limit:
            evicted = self._entries.popleft()
            for observer in self._observers:
                observer.on_evict(evicted)

        return entry

    def append_status(self, text: str) -> str:
        """Write to the status channel (not subject to eviction)."""
        clean = self.sanitizer.sanitize(text)
        self._statuses.append(clean)
        for observer in self._observers:
            observer.on_status(clean)
        return clean

    def entries(self) -> list[OutputEntry]:
        """Retained entries, oldest first."""
        return list(self._entries)

    def statuses(self) -> list[str]:
        """All status lines written so far, oldest first."""
        return list(self._statuses)

    def clear(self) -> None:
        """Drop retained entries. Sequence ids keep counting."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
