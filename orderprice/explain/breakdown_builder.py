from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import re
from typing import Iterator, List


# -----------------------------
# Public contract (API)
# -----------------------------


class BreakdownKind(str, Enum):
    STEP = "STEP"
    WARNING = "WARNING"
    META = "META"


MAX_MESSAGE_LEN = 240

_CODE_RE = re.compile(r"^[A-Z][A-Z0-9_]{2,63}$")  # e.g. BASE, CATALOG_DISCOUNT


def _validate_code(code: str) -> str:
    if not isinstance(code, str):
        raise TypeError("breakdown code must be str")
    code = code.strip()
    if not _CODE_RE.match(code):
        raise ValueError(
            f"invalid breakdown code '{code}'. Expected UPPER_SNAKE (3-64 chars), e.g. BASE, LINE_DISCOUNT"
        )
    return code


def _validate_message(message: str) -> str:
    if not isinstance(message, str):
        raise TypeError("breakdown message must be str")
    msg = message.strip()
    if not msg:
        raise ValueError("breakdown message must be non-empty")
    # Keep output render-safe for console/JSON consumers
    if "\n" in msg or "\r" in msg:
        raise ValueError("breakdown message may not contain newlines")
    if "\t" in msg:
        raise ValueError("breakdown message may not contain tabs")
    if len(msg) > MAX_MESSAGE_LEN:
        raise ValueError(f"breakdown message too long (max {MAX_MESSAGE_LEN} chars)")
    return msg


@dataclass(frozen=True)
class BreakdownEntry:
    seq: int
    kind: BreakdownKind
    code: str
    message: str


@dataclass
class Breakdown:
    """
    Explain trail of a single order line (or of the order-level adjustment).
    The calculator writes into this object while it folds over the lines.

    Iterating over a Breakdown yields the rendered strings.
    """

    _entries: List[BreakdownEntry] = field(default_factory=list)
    _seq: int = 0

    @property
    def entries(self) -> List[BreakdownEntry]:
        # Expose a copy to avoid accidental mutation
        return list(self._entries)

    def codes(self) -> List[str]:
        return [e.code for e in self._entries]

    def as_strings(self) -> List[str]:
        return BreakdownBuilder().build(self)

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_strings())

    def __len__(self) -> int:
        return len(self._entries)

    # --- Write API ---

    def add_step(self, code: str, message: str) -> None:
        self._append(kind=BreakdownKind.STEP, code=code, message=message)

    def add_warning(self, code: str, message: str) -> None:
        self._append(kind=BreakdownKind.WARNING, code=code, message=message)

    def add_meta(self, code: str, message: str) -> None:
        self._append(kind=BreakdownKind.META, code=code, message=message)

    def _append(self, *, kind: BreakdownKind, code: str, message: str) -> None:
        c = _validate_code(code)
        m = _validate_message(message)

        self._seq += 1
        self._entries.append(BreakdownEntry(seq=self._seq, kind=kind, code=c, message=m))


# -----------------------------
# Render / Output builder
# -----------------------------


class BreakdownBuilder:
    """
    Converts a Breakdown to list[str], keeping the codes for tests.
    """

    def build(self, breakdown: Breakdown) -> List[str]:
        if not isinstance(breakdown, Breakdown):
            raise TypeError("BreakdownBuilder.build expects a Breakdown instance")

        # Deterministic order = insertion order (seq)
        entries = sorted(breakdown.entries, key=lambda e: e.seq)
        return [self._render(e) for e in entries]

    def _render(self, e: BreakdownEntry) -> str:
        if e.kind == BreakdownKind.WARNING:
            return f"WARNING: {e.message}"

        if e.kind == BreakdownKind.META:
            return f"META: {e.message}"

        return e.message
