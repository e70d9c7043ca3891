# torrehanoi

A Tower of Hanoi game that runs in the terminal. It keeps a history of the
matches you have played. The game's messages are in Portuguese.

## Installing

```
pip install .
```

## Playing

```
torrehanoi
torrehanoi --file meu_historico.txt
```

`--file` chooses the history file. The default is `historico_hanoi.txt` in the
current directory.

The main menu has three options:

1. **Iniciar Novo Jogo**: enter your name (at most 49 characters are kept),
   then pick a number of disks from 3 to 10. The program asks again until the
   number is in that range. For each move, type the tower to take a disk from
   (`A`, `B` or `C`, upper or lower case), then the tower to put it on. A larger
   disk can never sit on a smaller one. An invalid move is reported and does
   not count. Type `S` or `s` at the "from" prompt to leave the game early.
   When you solve the puzzle, the game shows how many moves you made and the
   minimum possible (2ⁿ − 1). Every game, finished or not, is added to the
   history with your name, the number of disks, the moves you made and the
   date and time.
2. **Ver Historico de Partidas**: list every match, or search by player name
   (the name must match exactly, including upper and lower case) or by date
   (`AAAA-MM-DD`).
3. **Sair**: save the history and quit.

The screen is cleared between views with the system's `clear` command, or
`cls` on Windows.

The history file is read when the program starts. It is written when you choose
**Sair**, and also when input ends (for example on Ctrl-D). Each line of the
file is `name,disks,moves,YYYY-MM-DD HH:MM:SS`. If the file is missing, the
history starts empty. Lines that cannot be parsed are skipped, and a warning is
printed on stderr for each one.

## Using it as a library

```python
from torrehanoi.game import HanoiGame, InvalidMoveError

game = HanoiGame(3)
game.move("A", "C")
try:
    game.move("A", "C")        # a larger disk cannot go on a smaller one
except InvalidMoveError as exc:
    print(exc)
print(game.render())
print(game.moves, game.is_solved(), game.minimum_moves())
print(list(game.tower("a")))   # disks from bottom to top
```

```python
from torrehanoi.history import GameRecord, History

history = History([])
history.add(GameRecord.from_line("Ana,3,7,2024-05-01 10:00:00"))
history.save("historico_hanoi.txt")
print(history.format_all())
print([r.describe() for r in history.by_date("2024-05-01")])
print(history.format_search("Ana", history.by_player("Ana")))
```

`torrehanoi.stack.DiskStack` is the bounded stack used for each tower. It
raises `StackFullError` when you push onto a full stack and `StackEmptyError`
when you pop from an empty one. `peek()` returns 0 for an empty stack.

`torrehanoi.cli.run()` and `torrehanoi.game.play()` take `input_fn`,
`output_fn` and `clear` callables, so the menus and the game can be driven
without a terminal.

## Running the tests

```
pip install .[test]
pytest
```