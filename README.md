# spaceshooter

A top-down arcade space shooter built on pygame. You fly a ship around a
tile map while spawners release kamikaze and sniper ships. Every enemy finds
its way to you with A* pathfinding over the tiles. You score points for each
enemy you shoot. When a kamikaze rams you, you lose health, and the game ends
when your health reaches zero.

## Installation

```
pip install .
```

To also install the test tools:

```
pip install ".[test]"
```

## Playing

```
spaceshooter
```

Options:

| Option                | Meaning                                 | Default |
|-----------------------|-----------------------------------------|---------|
| `--difficulty {1,2,3}`| Enemy strength and points per kill      | 1       |
| `--map {1,2,3}`       | Which map file to play                  | 1       |
| `--volume N`          | Sound volume, 0 to 100                  | 50      |

Controls:

| Key          | Action                                  |
|--------------|-----------------------------------------|
| W A S D      | Move the ship. The ship points where it moves. |
| Space        | Fire                                    |
| Left Shift   | Leave the game                          |
| Escape       | End the session and close the window    |

Closing the window also ends the session.

On the map, tiles with the value 1 are speed strips. While the centre of your
ship is on one, you move twice as fast. Tiles above 1 are walls. They stop
ships and bullets, and pathfinding avoids them. Tiles with the value 2 are
enemy spawners. While fewer than four enemies are alive, every spawner
releases an enemy every 180 frames. Each new enemy is a sniper with a chance
of 2 in 10 and a kamikaze otherwise.

Points per kill depend on the difficulty:

| Difficulty | Kamikaze | Sniper |
|------------|----------|--------|
| 1          | 50       | 100    |
| 2          | 100      | 200    |
| 3          | 250      | 500    |

### Assets

The game reads its files from the `assets` directory inside the package:

- maps from `assets/maps/map1.txt` to `map3.txt`
- images from `assets/graphics/`
- sounds from `assets/sounds/`
- the HUD font from `assets/beon.ttf`

You need the map files to start a game. If an image, sound or font is
missing, the game logs an error and keeps running. It draws plain shapes in
place of missing images, plays no sound for a missing sound, and uses
pygame's default font when the font is missing.

## Using the pieces

The game logic works without a window, so you can use its parts on their own.

`spaceshooter.pathfinding.find_path` takes a grid of tile values, a start
tile and a finish tile. It returns the route as a string of direction digits.
`0` is right, and the digits go clockwise in steps of 45 degrees. An empty
string means the finish cannot be reached. A start or finish outside the
grid raises `ValueError`.

```python
from spaceshooter.pathfinding import find_path

grid = [
    [0, 0, 0],
    [0, 3, 0],
    [0, 0, 0],
]
route = find_path(grid, 0, 0, 2, 2)
```

A map is plain text: space-separated integers, one row per line, with blank
lines skipped. `spaceshooter.level.parse_map` turns such text into rows.
`Level.load_text` loads the text into a level and creates its spawners.

```python
from spaceshooter.level import Level, parse_map

rows = parse_map("3 3 3\n3 0 3\n3 3 3\n")

level = Level(difficulty=1)
level.load_text("3 3 3 3\n3 0 2 3\n3 3 3 3\n")
```

`Level.tile_at` looks up the tile under a pixel position. It raises
`TileOutOfRange` for positions outside the map.

To drive a session yourself, use `spaceshooter.game.Game`:

- `Game.load(difficulty, map_number, volume)` prepares a session on one of
  the map files.
- `Game.step(events, surface)` plays one frame. It returns a `GameOutcome`
  when the session ends (`GAME_OVER`, `MENU` or `CLOSED`) and `None`
  otherwise.
- `Game.run(screen, clock)` keeps playing frames at 60 per second until the
  session ends.

## What it does not do

- There is no menu screen. Left Shift ends the session with
  `GameOutcome.MENU`, and the `spaceshooter` command then exits.
- Snipers do not shoot. They chase you like kamikazes, but touching them
  costs you no health.
- There is no high-score storage. The score lasts only for the session.

## Tests

```
pytest
```