"""Detect Quake 3 games in console log output and store their kills."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import pymongo
import pymongo.errors

COLLECTION_NAME = "logs"
_MAX_LINE_BYTES = 64 * 1024

_WS = r"[\t\n\f\r ]"
_NEW_GAME_RE = re.compile(rf"Game_Start:{_WS}[0-9A-Za-z_]")
_END_GAME_RE = re.compile(rf"Exit:{_WS}")
_KILL_RE = re.compile(rf"([a-z]+){_WS}killed{_WS}([a-z]+)", re.IGNORECASE)


class CatcherError(Exception):
    """Raised when log data cannot be scanned or a game cannot be stored."""


@dataclass(frozen=True)
class Kill:
    """One frag: who killed whom."""

    killer: str
    victim: str


@dataclass
class Gamelog:
    """The kills recorded during one game."""

    kills: list[Kill] = field(default_factory=list)
    date: datetime | None = None

    def to_document(self) -> dict[str, Any]:
        """Return the game as a database document."""
        return {
            "kills": [{"killer": k.killer, "victim": k.victim} for k in self.kills],
            "date": self.date,
        }


def is_new_game(line: str) -> bool:
    """Return True if the line announces the start of a game."""
    return _NEW_GAME_RE.search(line) is not None


def is_end_game(line: str) -> bool:
    """Return True if the line announces the end of a game."""
    return _END_GAME_RE.search(line) is not None


def parse_kill(line: str) -> Kill | None:
    """Return the first kill mentioned in the line, or None."""
    match = _KILL_RE.search(line)
    return Kill(match.group(1), match.group(2)) if match else None


def _scan_lines(data: bytes) -> Iterator[str]:
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    for raw in lines:
        if len(raw) >= _MAX_LINE_BYTES:
            raise CatcherError("can not scan data: token too long")
        yield raw.removesuffix(b"\r").decode("utf-8", errors="replace")


class Catcher:
    """Follows games across chunks of log data and stores finished ones."""

    def __init__(self, collection: Any) -> None:
        self.collection = collection
        self.started = False
        self.current = Gamelog()

    @classmethod
    def connect(cls, dbconn: str, dbname: str) -> Catcher:
        """Create a catcher writing to the ``logs`` collection of a MongoDB database."""
        try:
            client = pymongo.MongoClient(dbconn)
        except pymongo.errors.PyMongoError as exc:
            raise CatcherError(str(exc)) from exc
        return cls(client[dbname][COLLECTION_NAME])

    def process(self, data: bytes | str) -> None:
        """Scan log data line by line, storing every game that ends with kills."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        for line in _scan_lines(data):
            if is_new_game(line):
                self.started = True
                self.current = Gamelog(date=datetime.now(timezone.utc))

            kill = parse_kill(line)
            if kill and self.started and kill.killer != kill.victim:
                self.current.kills.append(kill)

            if is_end_game(line) and self.started and self.current.kills:
                try:
                    self.collection.insert_one(self.current.to_document())
                except pymongo.errors.PyMongoError as exc:
                    raise CatcherError(f"catcher.process: can not insert data: {exc}") from exc
                self.started = False
                self.current = Gamelog()