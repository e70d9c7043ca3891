"""Tower of Hanoi game state, drawing and the interactive game loop."""

from __future__ import annotations

import os
import subprocess
import sys
from collections import deque
from typing import Callable

from .stack import DiskStack

TOWER_NAMES = ("A", "B", "C")


class InvalidMoveError(ValueError):
    """Raised when a requested move breaks the rules of the game."""


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def draw_disk_row(height: int, tower: DiskStack, max_disks: int) -> str:
    """Draw the disk (or bare pole) of one tower at one height."""
    disk = tower[height] if height < len(tower) else 0
    padding = " " * (max_disks - disk)
    body = f"{'#' * disk}{disk}{'#' * disk}" if disk > 0 else "|"
    return f"{padding}{body}{padding} "


class HanoiGame:
    """Three towers with all disks starting on tower A."""

    def __init__(self, num_disks: int) -> None:
        self.num_disks = num_disks
        self.moves = 0
        self._towers = {name: DiskStack(num_disks) for name in TOWER_NAMES}
        for disk in range(num_disks, 0, -1):
            self._towers["A"].push(disk)

    def tower(self, name: str) -> DiskStack:
        """Return the tower called A, B or C (case-insensitive)."""
        key = name.upper() if isinstance(name, str) else name
        try:
            return self._towers[key]
        except KeyError:
            raise InvalidMoveError(
                "Entrada invalida. As torres devem ser A, B ou C e diferentes."
            ) from None

    def move(self, source: str, target: str) -> None:
        """Move the top disk from one tower to another."""
        origin = self.tower(source)
        destination = self.tower(target)
        if origin is destination:
            raise InvalidMoveError(
                "Entrada invalida. As torres devem ser A, B ou C e diferentes."
            )
        if origin.is_empty():
            raise InvalidMoveError("Erro: Torre de origem vazia!")
        disk = origin.peek()
        if not destination.is_empty() and disk > destination.peek():
            raise InvalidMoveError(
                "Erro: Nao pode colocar um disco maior sobre um menor!"
            )
        origin.pop()
        destination.push(disk)
        self.moves += 1

    def is_solved(self) -> bool:
        return len(self._towers["C"]) == self.num_disks

    def minimum_moves(self) -> int:
        return (1 << self.num_disks) - 1

    def render(self) -> str:
        """Return the text picture of the towers and counters."""
        lines = [
            "",
            "--- Torre de Hanoi ---",
            f"Numero de Discos: {self.num_disks} | Movimentos: {self.moves}",
            "-------------------------",
        ]
        for height in range(self.num_disks - 1, -1, -1):
            lines.append(
                "".join(
                    draw_disk_row(height, self._towers[name], self.num_disks)
                    for name in TOWER_NAMES
                )
            )
        lines.append("---A-------B-------C---")
        return "\n".join(lines) + "\n"


def play(
    player_name: str,
    num_disks: int,
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], object] = _write,
    clear: Callable[[], object] = clear_screen,
) -> int:
    """Run one interactive game and return the number of moves made."""
    game = HanoiGame(num_disks)
    pending: deque[str] = deque()

    def show() -> None:
        clear()
        output_fn(game.render())

    def next_char() -> str:
        while True:
            while pending and pending[0].isspace():
                pending.popleft()
            if pending:
                return pending.popleft()
            pending.extend(input_fn() + "\n")

    show()
    output_fn(f"\nBem-vindo(a), {player_name}! Mova os discos de A para C.\n")
    output_fn("Digite 'S' ou 's' a qualquer momento para sair do jogo.\n")

    while not game.is_solved():
        output_fn("\nMover disco de (A, B, C) ou Sair (S): ")
        try:
            source = next_char()
        except EOFError:
            break
        if source in ("S", "s"):
            output_fn("Saindo do jogo atual.\n")
            break
        output_fn("Para (A, B, C): ")
        try:
            target = next_char()
        except EOFError:
            break
        pending.clear()

        try:
            game.move(source, target)
        except InvalidMoveError as error:
            output_fn(f"{error}\n")
        show()

    if game.is_solved():
        output_fn(
            f"\nPARABENS, {player_name}! Voce concluiu a Torre de Hanoi "
            f"em {game.moves} movimentos!\n"
        )
        output_fn(
            f"O numero minimo de movimentos para {game.num_disks} discos "
            f"eh {game.minimum_moves()}.\n"
        )
    return game.moves