"""
Title: Operator Command Transcript Recorder
Author: Alex Cooke
Date Created: 2026-01-15
Last Modified: 2026-01-15
Version: 1.0

Purpose:
Writes an append-only CSV transcript of the commands typed at the launch
sequencer console: when each command was entered, which action it mapped to
and whether the sequencer accepted it. Malformed input is recorded too, under
the "invalid" action, so a session can be reviewed after the fact.

Scope and Limitations:
- Write-only audit trail. Mission state is never reloaded from it.
- Operator text is free-form; commas are replaced so each row keeps four columns.
- Single-threaded use only; no locking.
- Timestamps come from an injected clock.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- pathlib (standard library)
- typing (standard library)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

HEADER = "timestamp,command,action,accepted\n"


@dataclass
class CommandRecorder:
    # One row per operator command; see module header for the format.
    filepath: Path
    clock: Callable[[], float]

    def __post_init__(self) -> None:
        self.filepath = Path(self.filepath)
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

        if not self.filepath.exists():
            with self.filepath.open("w", encoding="utf-8") as f:
                f.write(HEADER)

    def record(
        self,
        *,
        command: str,
        action: str,
        accepted: bool,
    ) -> None:
        ts = self.clock()
        text = command.strip().replace(",", " ")
        line = f"{ts:.6f},{text},{action},{accepted}\n"

        with self.filepath.open("a", encoding="utf-8") as f:
            f.write(line)
