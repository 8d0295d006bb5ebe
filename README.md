# mightydoom

A small top-down arena shooter. You play the slayer in a walled room with a few zombies in it. Your single bullet fires on its own in the direction you face. Clear the room, then walk into the goal area by the portal to go on to the next level. After the last level the game starts again from the first.

## Installing

```
pip install .
```

This also installs `pygame`, which the game uses for the window, drawing, input and music.

## Playing

```
mightydoom
```

The game opens on the main menu, in a 320x240 screen scaled up in the window.

| Key             | What it does                                             |
|-----------------|----------------------------------------------------------|
| W, A, S, D      | Move the slayer (held down, like an analogue stick)      |
| Up, Down        | Move the menu cursor                                     |
| Enter or Space  | Start the tutorial from the menu, or go back to the menu |
| L or Q          | Switch between the top-down and behind-player camera     |

Closing the window ends the game.

### Options

| Option             | Default  | Meaning                                   |
|--------------------|----------|-------------------------------------------|
| `--assets DIR`     | `assets` | Directory the music files are read from   |
| `--scale N`        | `2`      | Window scale factor, at least 1           |
| `--frames N`       | none     | Stop after this many frames               |

The menu plays `Main_Menu_n64.wav64` and the tutorial plays `Tutorial_5_5_11_5.wav64`, both looked up in the assets directory and played through `pygame.mixer`. If a file is missing or cannot be played, a message goes to standard error and the game carries on without music.

## How a level plays

- Zombies walk towards you and start a punch when you come within 30 units.
- The bullet flies straight from you; when it hits a zombie or leaves the arena it comes back to you and fires again.
- Each zombie takes five hits. A bar over its head shows its health, fading from green to red.
- A dead zombie leaves a pool of blood that shrinks away over time. Spawn marks show where zombies started during the first four seconds of a level.
- Once every zombie is dead the portal opens and arrows on the floor light up in turn towards it.
- Step into the goal area in front of the portal: the screen goes black for 15 frames and the next level loads.

## What it does not do

- Everything is drawn as flat coloured shapes on the floor plane; no 3D models, textures or sprites are loaded.
- Zombies' punches do no damage and the slayer has no health.
- The "Options" menu item can be selected but opens nothing.

## Package layout

- `mightydoom.state`: `GameState` and `run_state`, which runs one frame of the current state.
- `mightydoom.collision`: `Vec3` and `check_overlap`.
- `mightydoom.levels`: `SpawnData`, `LevelData`, `LEVEL_1`, `LEVEL_2` and `level_at`.
- `mightydoom.camera`: `Camera`, its two `CameraMode`s and `world_to_screen` projection.
- `mightydoom.scene`: `BannerType`, `FloorBanner`, `floor_banner` and `MapPiece`.
- `mightydoom.zombie`: `Zombie`, `Animation`, `HealthBar` and `update_all`.
- `mightydoom.player`: `Player`, `lerp` and `lerp_angle`.
- `mightydoom.bullets`: `Bullet`.
- `mightydoom.level_update`: `LevelProgress` and `LevelUpdate`, moving from one level to the next.
- `mightydoom.music`: `Music`, one looping track at a time.
- `mightydoom.menu`: `Menu` and `Controls`.
- `mightydoom.game`: `Tutorial`, one frame of game logic at a time.
- `mightydoom.render`: `Renderer`, drawing the menu and the game on a pygame surface.
- `mightydoom.main`: `read_controls` and `main`, the `mightydoom` command.

## Running the tests

```
pip install .[test]
pytest
```