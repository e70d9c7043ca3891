"""Match history records, their text file format and searches over them."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Iterator, Union

DEFAULT_HISTORY_FILE = "historico_hanoi.txt"

_NAME_MAX = 49
_DATE_MAX = 19

_LINE = re.compile(
    rf"([^,]{{1,{_NAME_MAX}}}),\s*([+-]?\d+),\s*([+-]?\d+),([^\n]{{1,{_DATE_MAX}}})"
)

PathType = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class GameRecord:
    """One finished match: who played, how many disks, moves and end time."""

    player: str
    disks: int
    moves: int
    finished_at: str

    def to_line(self) -> str:
        """Return the record as one line of the history file, without newline."""
        return f"{self.player},{self.disks},{self.moves},{self.finished_at}"

    @classmethod
    def from_line(cls, line: str) -> "GameRecord":
        """Parse a history file line; raise ValueError if it is malformed."""
        match = _LINE.match(line)
        if match is None:
            raise ValueError(f"Linha mal formatada: {line!r}")
        player, disks, moves, finished_at = match.groups()
        return cls(player, int(disks), int(moves), finished_at)

    def describe(self) -> str:
        """Return the human-readable description used in listings."""
        return (
            f"Jogador: {self.player}, Discos: {self.disks}, "
            f"Movimentos: {self.moves}, Data: {self.finished_at}"
        )


class History:
    """An ordered collection of match records, oldest first."""

    def __init__(self, records: Iterable[GameRecord] | None = None) -> None:
        self._records: list[GameRecord] = list(records or [])

    def add(self, record: GameRecord) -> None:
        """Append a record at the end of the history."""
        self._records.append(record)

    def clear(self) -> None:
        """Forget every record."""
        self._records.clear()

    def save(self, path: PathType = DEFAULT_HISTORY_FILE) -> None:
        """Write every record to a file, replacing its contents."""
        with open(path, "w", encoding="utf-8") as handle:
            for record in self._records:
                handle.write(record.to_line() + "\n")

    def load(self, path: PathType = DEFAULT_HISTORY_FILE) -> None:
        """Replace the records with those read from a file.

        A missing file leaves the history empty; malformed lines are
        reported on stderr and skipped.
        """
        self.clear()
        try:
            handle = open(path, "r", encoding="utf-8")
        except FileNotFoundError:
            return
        with handle:
            for line in handle:
                try:
                    self.add(GameRecord.from_line(line))
                except ValueError:
                    text = line if line.endswith("\n") else line + "\n"
                    sys.stderr.write(
                        f"Aviso: Linha mal formatada no historico.txt: {text}"
                    )

    def by_player(self, name: str) -> list[GameRecord]:
        """Return the records whose player name matches exactly."""
        return [record for record in self._records if record.player == name]

    def by_date(self, date: str) -> list[GameRecord]:
        """Return the records finished on a date given as AAAA-MM-DD."""
        prefix = date[:10]
        return [
            record
            for record in self._records
            if record.finished_at[:10] == prefix
        ]

    def format_all(self) -> str:
        """Return the numbered listing of every record."""
        lines = ["", "--- Historico de Partidas ---"]
        if not self._records:
            lines.append("Nenhum historico disponivel.")
        else:
            lines.extend(
                f"{number}. {record.describe()}"
                for number, record in enumerate(self._records, start=1)
            )
        lines.append("--------------------------")
        return "\n".join(lines) + "\n"

    def format_search(self, query: str, records: Iterable[GameRecord]) -> str:
        """Return the listing of search results for a query."""
        lines = ["", f"--- Resultados da Busca para '{query}' ---"]
        found = [record.describe() for record in records]
        if found:
            lines.extend(found)
        else:
            lines.append(f"Nenhuma partida encontrada para '{query}'.")
        lines.append("-----------------------------------")
        return "\n".join(lines) + "\n"

    def __iter__(self) -> Iterator[GameRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)