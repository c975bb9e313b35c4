"""Drawing the game with pygame, loading its textures, and the command entry point."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from solong.game import (
    PLAYER_ACTION,
    PLAYER_IDLE_0,
    Game,
    GameOver,
    Outcome,
)
from solong.mapcheck import MapError, read_map, validate_file, validate_map
from solong.model import IMG_SIZE, Key, TileType, error_text
from solong.tilemap import generate_tilemap

TEXTURE_DIR = "textures"
WINDOW_TITLE = "so_long"
FPS = 60
FONT_SIZE = 20
TEXT_COLOR = pygame.Color(255, 255, 255)
BACKGROUND = pygame.Color(0, 0, 0)
END_DELAY = 1.0

WALL_FILES = {
    "block": "wall_02.xpm",
    "up_left": "wall_ul.xpm",
    "up": "wall_u.xpm",
    "up_right": "wall_ur.xpm",
    "right": "wall_r.xpm",
    "down_right": "wall_dr.xpm",
    "down": "wall_d.xpm",
    "down_left": "wall_dl.xpm",
    "left": "wall_l.xpm",
}

TEXTURE_FILES = {
    "player_idle_0": "player_01.xpm",
    "player_idle_1": "player_02.xpm",
    "player_action": "player_03.xpm",
    "coin_0": "plant_03.xpm",
    "coin_1": "plant_04.xpm",
    "effect": "effect_w.xpm",
    "enemy_0": "enemy_01.xpm",
    "enemy_1": "enemy_02.xpm",
    "follower_0": "enemy_03.xpm",
    "follower_1": "enemy_04.xpm",
    "door_open": "door_01.xpm",
    "door_closed": "door_02.xpm",
}

END_FILES = {
    "win": "you_win.xpm",
    "lose": "you_lose.xpm",
}

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


def new_color(r, g, b, a):
    """Build a colour, wrapping each component into a byte."""
    return pygame.Color(r & 0xFF, g & 0xFF, b & 0xFF, a & 0xFF)


def wall_texture(position, window_size):
    """Name the wall texture for a wall tile at a pixel position.

    Corners get their own piece, the left, right and bottom edges theirs,
    and everything else (the top edge included) the plain block.
    """
    x, y = position
    width, height = window_size
    left = x == 0
    right = x == width - IMG_SIZE
    top = y == 0
    bottom = y == height - IMG_SIZE
    if left and top:
        return "up_left"
    if left and bottom:
        return "down_left"
    if right and top:
        return "up_right"
    if right and bottom:
        return "down_right"
    if left:
        return "left"
    if right:
        return "right"
    if bottom:
        return "down"
    return "block"


@dataclass
class Textures:
    """Every image the game draws."""

    walls: dict
    player_idle_0: pygame.Surface
    player_idle_1: pygame.Surface
    player_action: pygame.Surface
    coin_0: pygame.Surface
    coin_1: pygame.Surface
    effect: pygame.Surface
    enemy_0: pygame.Surface
    enemy_1: pygame.Surface
    follower_0: pygame.Surface
    follower_1: pygame.Surface
    door_open: pygame.Surface
    door_closed: pygame.Surface
    win: pygame.Surface | None = field(default=None)
    lose: pygame.Surface | None = field(default=None)


def _load_image(path):
    try:
        return pygame.image.load(str(path))
    except (OSError, pygame.error) as exc:
        raise OSError(f"cannot load texture {path}") from exc


def load_textures(directory):
    """Load every texture from a directory; the end screens are optional."""
    base = Path(directory)
    walls = {name: _load_image(base / filename) for name, filename in WALL_FILES.items()}
    images = {name: _load_image(base / filename) for name, filename in TEXTURE_FILES.items()}
    ends = {}
    for name, filename in END_FILES.items():
        try:
            ends[name] = _load_image(base / filename)
        except OSError:
            ends[name] = None
    return Textures(walls=walls, **images, **ends)


class Renderer:
    """Draws a game onto a pygame surface."""

    def __init__(self, screen, textures):
        self.screen = screen
        self.textures = textures
        self.end_delay = END_DELAY
        self._font = None

    @property
    def font(self):
        """The font used for the move counter."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def _player_image(self, game):
        textures = self.textures
        if game.player_frame == PLAYER_ACTION:
            return textures.player_action
        if game.player_frame == PLAYER_IDLE_0:
            return textures.player_idle_0
        return textures.player_idle_1

    def _tile_image(self, tile, game):
        textures = self.textures
        kind = tile.type
        if kind is TileType.WALL:
            return textures.walls[wall_texture(tile.position, game.window_size)]
        if kind is TileType.EXIT:
            return textures.door_closed if game.collects == 0 else textures.door_open
        if kind is TileType.COIN:
            return textures.coin_0 if game.coin_frame == 0 else textures.coin_1
        if kind is TileType.PLAYER:
            return self._player_image(game)
        if kind is TileType.ENEMY:
            return textures.enemy_0 if game.enemy_frame == 0 else textures.enemy_1
        if kind is TileType.FOLLOWER:
            return textures.follower_0 if game.follower_frame == 0 else textures.follower_1
        return None

    def _draw_text(self, game):
        if game.collects < 0:
            return
        width, _ = game.window_size
        text = self.font.render(str(game.moves), False, TEXT_COLOR)
        position = (int(width - IMG_SIZE / 2.3), int(IMG_SIZE - IMG_SIZE / 1.5))
        self.screen.blit(text, position)

    def draw(self, game):
        """Draw the map, the pick-up effect and the move counter."""
        self.screen.fill(BACKGROUND)
        effect_on = game.effect_visible
        for tile in game.tilemap.tiles():
            image = self._tile_image(tile, game)
            if image is not None:
                self.screen.blit(image, tile.position)
            if effect_on:
                self.screen.blit(self.textures.effect, game.effect_pos)
        self._draw_text(game)

    def _present(self):
        if pygame.display.get_init() and pygame.display.get_surface() is self.screen:
            pygame.display.flip()

    def draw_end(self, won):
        """Show the win or lose screen; return where it was drawn, or None."""
        self.screen.fill(BACKGROUND)
        image = self.textures.win if won else self.textures.lose
        if image is None:
            print("YOU WIN !" if won else "YOU LOSE !")
            return None
        width, height = self.screen.get_size()
        image_width, image_height = image.get_size()
        x = int((width - image_width) / 2)
        y = int((height - image_height) / 2)
        rect = self.screen.blit(image, (x, y))
        self._present()
        if self.end_delay > 0:
            time.sleep(self.end_delay)
        return rect


def _run(game, renderer):
    clock = pygame.time.Clock()
    try:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    key = _PYGAME_KEYS.get(event.key)
                    if key is not None:
                        game.handle_key(key)
            game.tick()
            renderer.draw(game)
            pygame.display.flip()
            clock.tick(FPS)
    except GameOver as over:
        if over.outcome is Outcome.WIN:
            renderer.draw_end(True)
        elif over.outcome is Outcome.LOSE:
            renderer.draw_end(False)


def main(argv=None):
    """Load the map named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = validate_file(args)
        rows = validate_map(read_map(path))
    except MapError as exc:
        sys.stdout.write(error_text(exc))
        return 0
    tilemap = generate_tilemap(rows)
    pygame.init()
    try:
        screen = pygame.display.set_mode(tilemap.window_size)
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            textures = load_textures(TEXTURE_DIR)
        except OSError:
            sys.stderr.write("Error\n")
            return 0
        _run(Game(tilemap), Renderer(screen, textures))
    finally:
        pygame.quit()
    return 0