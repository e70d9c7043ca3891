import pytest

from torrehanoi.game import (
    HanoiGame,
    InvalidMoveError,
    draw_disk_row,
    play,
)
from torrehanoi.stack import DiskStack

SOLUTION_3 = [("A", "C"), ("A", "B"), ("C", "B"), ("A", "C"),
              ("B", "A"), ("B", "C"), ("A", "C")]


def _scripted(lines):
    feed = iter(lines)

    def input_fn():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return input_fn


def _run(lines, num_disks=3, name="Ana"):
    out = []
    clears = []
    moves = play(name, num_disks, _scripted(lines), out.append,
                 lambda: clears.append(1))
    return moves, "".join(out), len(clears)


def test_initial_state():
    game = HanoiGame(4)
    assert list(game.tower("A")) == [4, 3, 2, 1]
    assert len(game.tower("B")) == 0
    assert len(game.tower("c")) == 0
    assert game.moves == 0
    assert not game.is_solved()


def test_minimum_moves():
    assert HanoiGame(3).minimum_moves() == 7
    assert HanoiGame(10).minimum_moves() == 1023


def test_valid_move_counts():
    game = HanoiGame(3)
    game.move("a", "b")
    assert list(game.tower("B")) == [1]
    assert list(game.tower("A")) == [3, 2]
    assert game.moves == 1


def test_larger_on_smaller_rejected():
    game = HanoiGame(3)
    game.move("A", "C")
    with pytest.raises(InvalidMoveError, match="maior sobre um menor"):
        game.move("A", "C")
    assert game.moves == 1
    assert list(game.tower("A")) == [3, 2]


def test_empty_source_rejected():
    game = HanoiGame(3)
    with pytest.raises(InvalidMoveError, match="origem vazia"):
        game.move("B", "C")
    assert game.moves == 0


@pytest.mark.parametrize("source,target", [("A", "A"), ("X", "B"), ("A", "Q")])
def test_invalid_towers_rejected(source, target):
    game = HanoiGame(3)
    with pytest.raises(InvalidMoveError, match="Entrada invalida"):
        game.move(source, target)
    assert game.moves == 0


def test_solution_solves():
    game = HanoiGame(3)
    for source, target in SOLUTION_3:
        game.move(source, target)
    assert game.is_solved()
    assert game.moves == game.minimum_moves()
    assert list(game.tower("C")) == [3, 2, 1]


def test_draw_empty_pole():
    assert draw_disk_row(0, DiskStack(3), 3) == "   |    "


def test_draw_disk():
    tower = DiskStack(3)
    tower.push(1)
    assert draw_disk_row(0, tower, 3) == "  #1#   "
    assert draw_disk_row(1, tower, 3) == "   |    "


def test_draw_row_width_constant():
    game = HanoiGame(5)
    widths = {len(draw_disk_row(h, game.tower("A"), 5)) for h in range(5)}
    assert widths == {len(draw_disk_row(0, DiskStack(5), 5))}


def test_render_layout():
    game = HanoiGame(3)
    lines = game.render().split("\n")
    assert lines[1] == "--- Torre de Hanoi ---"
    assert lines[2] == "Numero de Discos: 3 | Movimentos: 0"
    assert lines[-2] == "---A-------B-------C---"
    assert lines[4].startswith("  #1#")
    assert lines[6].startswith("###3###")


def test_play_solves_game():
    lines = [part for move in SOLUTION_3 for part in move]
    moves, output, clears = _run(lines)
    assert moves == 7
    assert "PARABENS, Ana! Voce concluiu a Torre de Hanoi em 7 movimentos!" in output
    assert "O numero minimo de movimentos para 3 discos eh 7." in output
    assert clears == 1 + 7


def test_play_accepts_both_towers_on_one_line():
    lines = [f"{s} {t}" for s, t in SOLUTION_3]
    moves, output, _ = _run(lines)
    assert moves == 7
    assert "PARABENS" in output


def test_play_quit():
    moves, output, _ = _run(["s"])
    assert moves == 0
    assert "Saindo do jogo atual." in output
    assert "PARABENS" not in output


def test_play_reports_invalid_input():
    moves, output, _ = _run(["A", "A", "A", "C", "A", "C", "S"])
    assert moves == 1
    assert "Entrada invalida" in output
    assert "Nao pode colocar um disco maior sobre um menor!" in output


def test_play_discards_rest_of_line():
    moves, _, _ = _run(["A B C", "S"])
    assert moves == 1


def test_play_stops_at_end_of_input():
    moves, output, _ = _run(["A", "B"])
    assert moves == 1
    assert "Bem-vindo(a), Ana!" in output