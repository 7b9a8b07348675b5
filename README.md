# cantina

A two-player arcade hub. The two players take turns walking around a space
cantina, talk to its characters and accept their challenges: each challenge
is a short mini-game that both players play, and the loser of each round gives
up a ticket. A player left with no ticket loses the match; if both run out at
once, there is no winner.

## Installing

```
pip install .
```

The game uses `pygame` for the window, sound and input.

## Playing

```
cantina
```

The game loads its assets from folders relative to the directory it is started
in: `Map/`, `Menu/`, `sprites/`, `Snake/`, `osu/`, `Ships/` and `JarJar/`.
A missing image is replaced by a plain coloured rectangle and a missing font
by pygame's default font, but the map's collision grid (`Map/collision.txt`)
and the beatmaps (`osu/beatmaps/`) are required. Music plays only when the
pygame mixer could be started. Best scores are read from and written to
`Map/bestscore.txt`; a missing file counts as all zeros.

1. Press any key on the title screen.
2. Move the mouse over the light or the dark side and click to choose the
   first player's side; the second player gets the other one.
3. Each player types a name (up to 10 printable characters, Backspace erases)
   and presses Enter.
4. Walk with the arrow keys; press Enter on a door or in front of a character
   to interact. In a dialog, pick "oui" or "non" with Left/Right and confirm
   with Enter; Escape leaves the dialog.

Every player starts with 5 tickets. After a mini-game the lower score loses a
ticket (in the ship game, the slower time loses); a tie costs both players one.
The barman explains the rules and the protocol droid shows the best scores.

## Mini-games

- **Snake** – steer the snake around a checkered board with the arrow keys and
  eat apples; leaving the board or biting your own body ends the round, and
  Escape quits it. The score is the number of apples eaten.
- **Rhythm** – pick one of five beatmaps with Up/Down and Enter (or a click),
  press Enter when ready, and after a countdown press any key while the cursor
  is over the current circle. Each such press scores 6 points. The round lasts
  as long as the music.
- **Ships** – press Space to start, then shoot down all 25 wandering ships with
  the mouse; each player's time is counted in seconds and the faster one wins.
  Hold P to pause, Escape quits.
- **Duck fishing** – drag the swimming creatures onto the boat with the rod
  before the 60-second timer runs out; each one dropped on the boat scores a
  point. P pauses and resumes, Escape quits.

## What it does not do

The jackpot character and the race character only say a line: no mini-game
is started for them.

## Using the pieces

The game logic lives in modules that work without a window:

```python
from cantina.scores import read_scores, write_scores
from cantina.beatmap import load_beatmap, parse_hit_objects, scale_to_screen
from cantina.tournament import compare_scores, check_win, record_best
from cantina.snake import SnakeRound
from cantina.ships import create_ships, spawn_ships, move_ships, shoot
from cantina.ducks import create_ducks, spawn_ducks, move_ducks

round_ = SnakeRound()
over = round_.step()          # advance one tick; True when the round ends
print(round_.score, len(round_.snake))
```

`cantina.character.Player` holds a player's name, side, tickets and last
score; `cantina.collision.load_collision_grid` reads the map grid and
`CollisionGrid.event_at` tells which activity a cell starts.

## Running the tests

```
pip install .[test]
pytest
```