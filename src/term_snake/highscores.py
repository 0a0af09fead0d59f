"""Persistent top-N high-score table."""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

MAX_ENTRIES = 5
NEW_FILE_MODE = 0o644


class HighScoreError(Exception):
    """Raised when the high-score table cannot be written."""


class HighScoreEntry(BaseModel):
    """One row of the high-score table."""

    name: str
    score: int = Field(ge=0)
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


_TABLE = TypeAdapter(list[HighScoreEntry])


def append_entry(
    table: list[HighScoreEntry],
    entry: HighScoreEntry,
    limit: int = MAX_ENTRIES,
) -> list[HighScoreEntry]:
    """Return a new table with *entry* added, best first, cut to *limit*.

    The sort is stable, so among equal scores older entries stay ahead.
    """
    ranked = sorted([*table, entry], key=lambda e: e.score, reverse=True)
    return ranked[:limit]


class HighScoreStore:
    """High scores kept as a JSON array in a single file.

    Reads never fail: a missing or malformed file is an empty table.
    Writes replace the whole file atomically and raise
    :class:`HighScoreError` on failure.
    """

    def __init__(self, path: str | Path, limit: int = MAX_ENTRIES) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1.")
        self.path = Path(path)
        self.limit = limit

    def load(self) -> list[HighScoreEntry]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read high scores from %s: %s", self.path, exc)
            return []

        try:
            table = _TABLE.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "Ignoring malformed high-score file %s (%d errors).",
                self.path, exc.error_count(),
            )
            return []
        ranked = sorted(table, key=lambda e: e.score, reverse=True)
        return ranked[: self.limit]

    def _file_mode(self) -> int:
        """Permission bits of the existing file, or 0644 for a new one."""
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            return NEW_FILE_MODE

    def save(self, table: list[HighScoreEntry]) -> None:
        payload = json.dumps(
            _TABLE.dump_python(table, mode="json"), indent=2, ensure_ascii=False,
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent,
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.chmod(tmp_name, self._file_mode())
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise HighScoreError(
                f"Could not save high scores to {self.path}: {exc}",
            ) from exc
        logger.info("Saved %d high scores to %s.", len(table), self.path)

    def append(
        self, table: list[HighScoreEntry], entry: HighScoreEntry,
    ) -> list[HighScoreEntry]:
        return append_entry(table, entry, self.limit)

    def reset(self) -> list[HighScoreEntry]:
        """Replace the stored table with an empty one."""
        self.save([])
        return []

    def record(
        self, name: str, score: int, when: datetime | None = None,
    ) -> list[HighScoreEntry]:
        """Add a finished game to the stored table and return the table."""
        entry = HighScoreEntry(
            name=name,
            score=score,
            date=when or datetime.now(timezone.utc),
        )
        table = self.append(self.load(), entry)
        self.save(table)
        return table
