"""Game state and rules: player moves, enemy patrols, animation timing."""

from __future__ import annotations

import enum

from solong.model import Enemy, EnemyType, Key, Tile, TileType

IDLE_FRAMES = 17
ACTION_FRAMES = 10
COIN_FRAMES = 25
EFFECT_FRAMES = 7
BASIC_ENEMY_FRAMES = 16
FOLLOWER_FRAMES = 6
ENEMY_MOVE_PERIOD = 40

PLAYER_ACTION = "action"
PLAYER_IDLE_0 = "idle_0"
PLAYER_IDLE_1 = "idle_1"

_ARROWS = {
    Key.UP: "up",
    Key.DOWN: "down",
    Key.LEFT: "left",
    Key.RIGHT: "right",
}


class Outcome(enum.Enum):
    """How a game came to an end."""

    WIN = "win"
    LOSE = "lose"
    QUIT = "quit"


class GameOver(Exception):
    """Raised when the game ends; carries the outcome."""

    def __init__(self, outcome):
        super().__init__(outcome.value)
        self.outcome = outcome


def define_dir(value):
    """Map a signed distance to a direction: 1 toward larger, 0 toward smaller, -1 none."""
    if value < 0:
        return 1
    if value > 0:
        return 0
    return -1


class Game:
    """The running game: the map, the player, the enemies and the animation state."""

    def __init__(self, tilemap):
        self.tilemap = tilemap
        self.player = tilemap.player
        self.collects = tilemap.collects
        self.enemies = list(tilemap.enemies)
        self.moves = 0

        self.player_frame = PLAYER_ACTION
        self.player_framecount = 0
        self.coin_frame = 0
        self._coin_count = 0
        self.enemy_frame = 0
        self._enemy_count = 0
        self.follower_frame = 0
        self._follower_count = 0
        self._move_count = 0

        self.effect_pos = (0, 0)
        self.effect_counter = 0

    @property
    def window_size(self):
        """Size in pixels of the playing field."""
        return self.tilemap.window_size

    @property
    def effect_visible(self):
        """Whether the pick-up effect is still showing."""
        return self.effect_counter < EFFECT_FRAMES

    # ------------------------------------------------------------ effects

    def _start_effect(self, position):
        self.effect_counter = 0
        self.effect_pos = position

    def _start_action(self):
        self.player_framecount = 0
        self.player_frame = PLAYER_ACTION

    def _kill_player(self, position):
        self.player = None
        self._start_effect(position)
        raise GameOver(Outcome.LOSE)

    def _remove_player(self):
        self.player.type = TileType.EMPTY
        self.player = None
        raise GameOver(Outcome.WIN)

    # ------------------------------------------------------------ enemies

    @staticmethod
    def _place_enemy(enemy, tile):
        enemy.tile.type = TileType.EMPTY
        tile.type = TileType.FOLLOWER if enemy.type is EnemyType.FOLLOW else TileType.ENEMY
        enemy.tile = tile

    def _step_enemy(self, enemy, backward, forward):
        if enemy.direction == 0:
            target = getattr(enemy.tile, backward)
        elif enemy.direction == 1:
            target = getattr(enemy.tile, forward)
        else:
            return True
        if target is not None and target.type is TileType.EMPTY:
            self._place_enemy(enemy, target)
        elif target is not None and target.type is TileType.PLAYER:
            self._place_enemy(enemy, target)
            self._kill_player(enemy.tile.position)
        else:
            enemy.direction = 1 if enemy.direction == 0 else 0
            return False
        return True

    def move_horizontal(self, enemy):
        """Step an enemy left (direction 0) or right (1); turn it round if blocked."""
        return self._step_enemy(enemy, "left", "right")

    def move_vertical(self, enemy):
        """Step an enemy up (direction 0) or down (1); turn it round if blocked."""
        return self._step_enemy(enemy, "up", "down")

    def follow_player(self, enemy):
        """Step a follower toward the player along its longer axis first."""
        if self.player is None:
            return
        ex, ey = enemy.tile.position
        px, py = self.player.position
        dis_x = ex - px
        dis_y = ey - py
        if dis_x > dis_y:
            enemy.direction = define_dir(dis_x)
            if not self.move_horizontal(enemy) or enemy.direction == -1:
                enemy.direction = define_dir(dis_y)
                self.move_vertical(enemy)
        else:
            enemy.direction = define_dir(dis_y)
            if not self.move_vertical(enemy) or enemy.direction == -1:
                enemy.direction = define_dir(dis_x)
                self.move_horizontal(enemy)

    def move_enemies(self):
        """Count a frame; every ENEMY_MOVE_PERIOD frames move each enemy once."""
        self._move_count += 1
        if self._move_count < ENEMY_MOVE_PERIOD:
            return
        if not self.enemies:
            return
        for enemy in self.enemies:
            if enemy.type is EnemyType.HORIZONTAL:
                self.move_horizontal(enemy)
            elif enemy.type is EnemyType.VERTICAL:
                self.move_vertical(enemy)
            elif enemy.type is EnemyType.FOLLOW:
                self.follow_player(enemy)
        self._move_count = 0

    # ------------------------------------------------------------ player

    def _move_to_empty(self, tile):
        tile.type = TileType.PLAYER
        if self.player.type is not TileType.EXIT:
            self.player.type = TileType.EMPTY
        self.player = tile

    def _pick_coin(self, tile):
        tile.type = TileType.EMPTY
        self.collects -= 1
        self._start_effect(tile.position)
        self._start_action()

    def move_to(self, tile):
        """Try to move the player onto a tile; return 1 if it counts as a move, else 0."""
        if tile is None:
            return 0
        if tile.type is TileType.COIN:
            self._pick_coin(tile)
        elif tile.type is TileType.EXIT and self.collects <= 0:
            self._start_effect(tile.position)
            self._remove_player()
        if tile.type is TileType.EMPTY:
            self._move_to_empty(tile)
        elif tile.type in (TileType.ENEMY, TileType.FOLLOWER):
            self._kill_player(tile.position)
        elif tile.type in (TileType.WALL, TileType.EXIT):
            return 0
        return 1

    def handle_key(self, key):
        """React to a key press; return True if it was an arrow key."""
        if key == Key.ESC:
            raise GameOver(Outcome.QUIT)
        if self.player is None:
            return False
        try:
            direction = _ARROWS[Key(key)]
        except (ValueError, KeyError):
            return False
        self.moves += self.move_to(getattr(self.player, direction))
        return True

    # ------------------------------------------------------------ animation

    def _animate_player(self):
        if self.player_frame == PLAYER_ACTION and self.player_framecount >= ACTION_FRAMES:
            self.player_frame = PLAYER_IDLE_1
        elif self.player_framecount == IDLE_FRAMES:
            self.player_frame = PLAYER_IDLE_0
        elif self.player_framecount >= IDLE_FRAMES * 2:
            self.player_frame = PLAYER_IDLE_1
            self.player_framecount = 0
        self.player_framecount += 1

    def _animate_coins(self):
        if self._coin_count == COIN_FRAMES:
            self.coin_frame = 0
        elif self._coin_count >= COIN_FRAMES * 2:
            self.coin_frame = 1
            self._coin_count = 0
        self._coin_count += 1

    def _animate_enemies(self):
        self.move_enemies()
        if self._enemy_count == BASIC_ENEMY_FRAMES:
            self.enemy_frame = 0
        elif self._enemy_count > BASIC_ENEMY_FRAMES * 2:
            self.enemy_frame = 1
            self._enemy_count = 0
        self._enemy_count += 1
        if self._follower_count == FOLLOWER_FRAMES:
            self.follower_frame = 0
        elif self._follower_count > FOLLOWER_FRAMES * 2:
            self.follower_frame = 1
            self._follower_count = 0
        self._follower_count += 1

    def tick(self):
        """Advance one animation frame, moving enemies when their turn comes."""
        if self.effect_counter < EFFECT_FRAMES:
            self.effect_counter += 1
        self._animate_player()
        self._animate_coins()
        self._animate_enemies()