"""Grid-dungeon roguelike game logic: maps, autotiling, path finding, animation timing, menus, pixel and nine-patch helpers, stats and spells."""

__version__ = "0.1.0"

__all__ = [
    "action_animations",
    "animations",
    "game",
    "gamemap",
    "geometry",
    "imaging",
    "menu",
    "moves",
    "nine_patch",
    "player",
    "sprite_text",
    "stats",
    "tiles",
    "world_number",
]