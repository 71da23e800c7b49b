# dungeonkit

`dungeonkit` holds the game logic of a turn-based roguelike played on a square grid. Creatures walk the dungeon, attack, and cast spells. The package is plain Python and uses only the standard library. It does not depend on any game engine. Everything it computes is data you can hand to whatever draws the game.

## Modules

### `dungeonkit.geometry`

- `IVec2` is a frozen, ordered integer vector. It supports `+`, `-`, unary `-` and multiplication by an integer.
  - `magnitude()` returns the Euclidean length.
  - `normalized()` divides by the length and truncates each component toward zero. The zero vector stays `(0, 0)`.
  - `manhattan(other)` returns the Manhattan distance to `other`.
  - `IVec2.UP`, `DOWN`, `LEFT` and `RIGHT` are the unit steps. `ORTHO_DIRECTIONS` lists them in that order.
- `Orientation` has eight members, from `SOUTH` through `SOUTH_WEST`.
  - `to_vector()` returns the unit step of the orientation.
  - `Orientation.from_vector(direction)` normalizes the vector and returns its orientation. If the result is not one of the eight steps, it logs a warning and returns `SOUTH`.
- `find_path(start, end, tiles, blockers)` finds a shortest path that moves only orthogonally.
  - The path runs over `tiles` and avoids `blockers`. The end tile itself may be a blocker.
  - It returns a list that leaves out `start` and ends with `end`.
  - It returns `None` when no path exists or when `start == end`.
- `world_position(position, z)` returns `(24 * x, 24 * y, z)`.
- The module also holds the shared constants: `TILE_SIZE`, the depth layers (`TILE_Z`, `POKEMON_Z`, `EFFECT_Z`, `SHADOW_POKEMON_Z`), `WALK_SPEED`, `PROJECTILE_SPEED`, `POSITION_TOLERANCE` and `FRAME_DURATION_MILLIS`.

### `dungeonkit.game`

- Enums:
  - `GameState`: the game starts in `LOADING`.
  - `GamePlayingSet`: the phases of a playing frame, in the order they run.
  - `AnimKey`, `Faction`, `PieceKind`, `ScalingMode` and `LoadState`.
- Dataclasses: `Piece` and `Pokemon`, which holds `id` and `form_index`.
- `ui_scale(scaling_mode, fixed_ratio, window_width, window_height, projection_scale)` returns the UI scale factor for `FIXED_VERTICAL` and `FIXED_HORIZONTAL` projections. It returns `None` for any other mode.
- `next_loading_state(load_states)` checks the load states of the tracked assets.
  - It returns `GameState.LOADING` while any asset is still loading.
  - Otherwise it returns `GameState.ASSETS_LOADED`.
  - It logs failed assets but does not wait for them.

### `dungeonkit.moves`

- `MoveCategory.damage_stats()` returns the attacking and defending stats for a move:
  - physical moves use `(ATTACK, DEFENSE)`;
  - special moves use `(SPECIAL_ATTACK, SPECIAL_DEFENSE)`;
  - status moves return `None`.
- `AttackStat.label()` and `DefenseStat.label()` return display names such as `"Special Attack"`.
- `Spell` is built from `ProjectileSpell`, `SpellHit` and `SpellCast`, together with an inclusive range.
- `Spell.in_range(distance)` tells whether a target at that distance can be reached.

### `dungeonkit.stats`

- `Stat` holds a `base` and a `bonus`. `value()` returns their sum.
- `Stats.set_base(hp, attack, special_attack, defense, special_defense, speed)` replaces every base value and keeps the bonuses.
- `Health.from_stats(stats)` returns full health sized by the health stat.
- `Health.is_dead()` is true once `value <= 0`.

### `dungeonkit.gamemap`

- `TerrainData` holds a `TerrainType` (`GROUND`, `WALL` or `ENVIRONMENT`) and, for environment terrain only, an `EnvironmentType` (`WATER` or `LAVA`). Any other combination raises `ValueError`.
- `GameMap.default_map()` builds a fixed floor:
  - ground covers x 4–19, y 1–19;
  - walls fill the rest of the block x 0–10, y 0–21.
- `GameMap.neighbors(position)` returns the existing tiles among the eight around a position.
- `GameMap.associate_entity_to_tile(entity, position)` records which entity draws a tile, in `tiles_lookup`.

### `dungeonkit.tiles`

- `find_sprite_index_tile(position, tiles)` compares a tile's 3×3 neighbourhood with 47 patterns. Each neighbour counts as either "same terrain" or "absent or different".
  - It returns the sprite index of the first pattern that matches.
  - If none matches, it returns `DEFAULT_INDEX` and logs a warning.
  - It raises `KeyError` when there is no tile at the position.
- `tile_map_index(position, terrain, tiles)` adds the column offset of the terrain type to that index:
  - `+12` for ground;
  - `+3` for walls;
  - `+24` for environment terrain.

  `terrain` may be a `TerrainData` or a `TerrainType`.

### `dungeonkit.animations`

- `Animator` plays a list of `AnimationFrame`s, once or in a loop. Each frame has an atlas index and a duration in seconds.
  - `tick(delta)` returns a `FrameChanged` when it switches to a new frame, and `None` otherwise.
  - A one-shot animation is `is_finished()` once the time of its last frame has run out.
  - `is_hit_frame()`, `is_rush_frame()` and `is_return_frame()` compare the current frame with the marked frames. By default the hit and return frames are the last frame and the rush frame is the first.
  - An empty frame list raises `ValueError`.
- `AnimationIndices.from_animation(orientation, anim_step)` returns the first and last atlas index of an orientation's row of frames.
- `pokemon_animator(durations, anim_key, orientation, return_frame, hit_frame, rush_frame, game_speed)` builds an animator from durations given in ticks. A tick lasts 25 ms divided by `game_speed`, rounded down to whole milliseconds. Only the `IDLE` animation loops.
- `shadow_frames(faction, terrain, game_speed)` returns the three looping shadow frames for a faction standing on a terrain.

### `dungeonkit.action_animations`

- `DeathAnimation.tick(delta)` flashes a dying piece.
  - It alternates `visibility` between `HIDDEN` and `INHERITED` for 27 flashes.
  - It returns `PLAYING` while flashing.
  - It returns `FINISHED` once the last flash is over.
- `MoveAnimation.from_tiles(entity, start, end)` and `MoveAnimation.step(current, delta, game_speed)` move a piece between two tiles by interpolation.
  - Each step returns the new position and a status.
  - On arrival the status is `NEXT`.
- `ProjectileAnimation.step(current, delta, game_speed)` works the same way. On arrival it snaps to the target and reports `FINISHED`.
- `hurt_shake(elapsed_seconds, orientation)` returns the shake offset for a hurt piece. The shake is vertical when the piece faces north or south and horizontal otherwise.

### `dungeonkit.menu`

- `default_menu()` returns three buttons: "Play", then two footer buttons.
- `MenuButton.interact(interaction)` does one of two things:
  - it switches `background` between the normal and hovered colours;
  - on a press, it returns the state to switch to. Pressing "Play" returns `GameState.PLAYING`.

### `dungeonkit.imaging`

- `extract_sub_image(data, atlas_width, x, y, width, height)` copies a block of pixels out of tightly packed RGBA bytes.
  - It returns `None` for an empty block.
  - It raises `ValueError` when the block reaches outside the atlas.
- `add_color_to_pixel` and `subtract_color_from_pixel` work channel by channel and clamp the result to 0–255. The pixel keeps its alpha.
- `blend_pixel` blends a colour over the pixel by the colour's alpha.
- `invert_color` returns the complement of an RGB triple.

### `dungeonkit.nine_patch`

- `build_nine_patch(dest_rect, atlas_size, texture_rect, border)` returns the nine `PatchQuad`s of a frame: each pairs a destination `Rect` with a texture UV `Rect`.
- `BorderedFrame` lays out a bordered frame:
  - `content_rect(available)` is the space left for contents after padding and margin. It never has a negative size.
  - `paint_rect(content_min_rect)` is the area the frame is painted over.
  - `paint(paint_rect)` returns the meshes to draw, border first, then the optional background.

### `dungeonkit.sprite_text`

- `SpriteText` holds a list of `SpriteTextSection`s together with a `JustifyText` alignment and a `LineBreak` behaviour.
  - `from_section` and `from_sections` build one.
  - `with_alignment` and `with_no_wrap` return changed copies.
  - `total_chars_count()` counts the characters across all sections.
- `SpriteTextStyle` holds the font, size and colours. The colour defaults to white.

### `dungeonkit.player`

- `PlayerAction` lists what the player can ask for.
- `direction_for(action)` returns the step of a movement action, or `None` for other actions.
- `default_key_bindings()` lists each action with the key that triggers it:
  - WASD and the arrow keys move;
  - Space skips a turn;
  - Digit1–Digit4 select the spell slots.
- `actions_for_key(key)` returns the actions bound to a key.
- `flamethrower()` returns the spell of the first slot. It is a special-category projectile that reaches 1 to 3 tiles and deals 1 damage.

### `dungeonkit.world_number`

- `WorldNumber.label()` formats the value. Positive values get a leading `+`.
- `AnimatedWorldNumber.tick(delta)` moves a floating number:
  - the number rises 10 units per second;
  - it fades in the second half of its one-second life;
  - the method returns `True` on the tick the number expires.

## Examples

```python
from dungeonkit.gamemap import GameMap
from dungeonkit.geometry import IVec2, find_path
from dungeonkit.tiles import tile_map_index

game_map = GameMap.default_map()
path = find_path(IVec2(4, 4), IVec2(8, 6), game_map.tiles.keys(), set())

terrain = game_map.tiles[IVec2(4, 4)]
index = tile_map_index(IVec2(4, 4), terrain, game_map.tiles)
```

```python
from dungeonkit.animations import pokemon_animator
from dungeonkit.game import AnimKey
from dungeonkit.geometry import Orientation

animator = pokemon_animator([4, 4, 4], AnimKey.WALK, Orientation.SOUTH, None, None, None, 1.0)
changed = animator.tick(0.1)  # the first tick shows frame 0
```

## What it does not do

This is a library of game rules and timings, not a playable game. The package does not provide:

- a window, rendering or sound;
- keyboard handling beyond the binding table;
- asset or font loading, or glyph layout;
- enemy AI or the turn and action system that would drive these pieces.

It also ships no command to run.

## Tests

The tests live in `tests/` and use pytest. The `test` extra installs it.