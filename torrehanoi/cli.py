"""Interactive menus for playing Tower of Hanoi and browsing the history."""

from __future__ import annotations

import argparse
import re
import sys
from datetime import datetime
from typing import Callable

from .game import clear_screen, play
from .history import DEFAULT_HISTORY_FILE, GameRecord, History

InputFn = Callable[[], str]
OutputFn = Callable[[str], object]

MIN_DISKS = 3
MAX_DISKS = 10
_NAME_MAX = 49
_DATE_LEN = 10

_INT = re.compile(r"\s*([+-]?\d+)")

_MAIN_MENU = (
    "--- Simulador da Torre de Hanoi ---\n"
    "1. Iniciar Novo Jogo\n"
    "2. Ver Historico de Partidas\n"
    "3. Sair\n"
    "-----------------------------------\n"
)

_HISTORY_MENU = (
    "\n--- Menu do Historico ---\n"
    "1. Exibir todo o Historico\n"
    "2. Buscar Historico por Nome de Jogador\n"
    "3. Buscar Historico por Data\n"
    "4. Voltar ao Menu Principal\n"
    "--------------------------\n"
)


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _pause(input_fn: InputFn, output_fn: OutputFn, prefix: str = "") -> None:
    output_fn(f"{prefix}Pressione Enter para continuar...")
    input_fn()


def _read_token(input_fn: InputFn) -> str:
    while True:
        words = input_fn().split()
        if words:
            return words[0]


def read_int(
    prompt: str, input_fn: InputFn = input, output_fn: OutputFn = _write
) -> int | None:
    """Prompt for a number; return it, or None if the line holds no number."""
    output_fn(prompt)
    while True:
        line = input_fn()
        if line.strip():
            break
    match = _INT.match(line)
    return int(match.group(1)) if match else None


def ask_disk_count(input_fn: InputFn = input, output_fn: OutputFn = _write) -> int:
    """Ask for the number of disks until it lies between 3 and 10."""
    while True:
        count = read_int(
            f"Digite o numero de discos ({MIN_DISKS} a {MAX_DISKS}): ",
            input_fn,
            output_fn,
        )
        if count is not None and MIN_DISKS <= count <= MAX_DISKS:
            return count


def history_menu(
    history: History,
    input_fn: InputFn = input,
    output_fn: OutputFn = _write,
    clear: Callable[[], object] = clear_screen,
) -> None:
    """Show the history menu until the user goes back."""
    while True:
        clear()
        output_fn(_HISTORY_MENU)
        choice = read_int("Escolha uma opcao: ", input_fn, output_fn)
        if choice == 1:
            clear()
            output_fn(history.format_all())
            _pause(input_fn, output_fn, "\n")
        elif choice == 2:
            output_fn("Digite o nome do jogador para buscar: ")
            name = input_fn()[:_NAME_MAX]
            clear()
            output_fn(history.format_search(name, history.by_player(name)))
            _pause(input_fn, output_fn, "\n")
        elif choice == 3:
            output_fn("Digite a data (AAAA-MM-DD) para buscar: ")
            date = _read_token(input_fn)[:_DATE_LEN]
            clear()
            output_fn(history.format_search(date, history.by_date(date)))
            _pause(input_fn, output_fn, "\n")
        elif choice == 4:
            return
        else:
            output_fn("Opcao invalida. Tente novamente.\n")
            _pause(input_fn, output_fn)


def _new_game(
    history: History,
    input_fn: InputFn,
    output_fn: OutputFn,
    clear: Callable[[], object],
    now: Callable[[], datetime],
) -> None:
    clear()
    output_fn("--- Iniciar Novo Jogo ---\n")
    output_fn(f"Digite seu nome (max {_NAME_MAX} caracteres): ")
    name = input_fn()[:_NAME_MAX]
    disks = ask_disk_count(input_fn, output_fn)
    moves = play(name, disks, input_fn, output_fn, clear)
    finished_at = now().strftime("%Y-%m-%d %H:%M:%S")
    history.add(GameRecord(name, disks, moves, finished_at))
    output_fn("\nPartida adicionada ao historico!\n")
    _pause(input_fn, output_fn)


def run(
    history: History | None = None,
    input_fn: InputFn = input,
    output_fn: OutputFn = _write,
    clear: Callable[[], object] = clear_screen,
    now: Callable[[], datetime] = datetime.now,
) -> History:
    """Run the main menu until the user quits or input ends; return the history."""
    if history is None:
        history = History()
    try:
        while True:
            clear()
            output_fn(_MAIN_MENU)
            choice = read_int("Escolha uma opcao: ", input_fn, output_fn)
            if choice == 1:
                _new_game(history, input_fn, output_fn, clear, now)
            elif choice == 2:
                history_menu(history, input_fn, output_fn, clear)
            elif choice == 3:
                output_fn("Saindo do jogo. Salvando historico...\n")
                break
            else:
                output_fn("Opcao invalida. Tente novamente.\n")
                _pause(input_fn, output_fn)
    except EOFError:
        pass
    return history


def main(argv: list[str] | None = None) -> int:
    """Load the history, run the menus, then save the history."""
    parser = argparse.ArgumentParser(description="Simulador da Torre de Hanoi")
    parser.add_argument(
        "--file",
        default=DEFAULT_HISTORY_FILE,
        help="arquivo de historico das partidas",
    )
    args = parser.parse_args(argv)
    history = History()
    history.load(args.file)
    run(history)
    history.save(args.file)
    return 0


if __name__ == "__main__":
    sys.exit(main())