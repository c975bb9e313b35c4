import pytest

from solong.game import (
    ENEMY_MOVE_PERIOD,
    EFFECT_FRAMES,
    PLAYER_ACTION,
    Game,
    GameOver,
    Outcome,
    define_dir,
)
from solong.model import IMG_SIZE, EnemyType, Key, TileType
from solong.tilemap import generate_tilemap


def make_game(rows):
    return Game(generate_tilemap(rows))


SIMPLE = ["1111111\n", "1P0C0E1\n", "1111111"]


def at(game, x, y):
    return game.tilemap.rows[y][x]


def test_define_dir():
    assert define_dir(-5) == 1
    assert define_dir(5) == 0
    assert define_dir(0) == -1


def test_move_to_empty_counts_move():
    game = make_game(SIMPLE)
    start = game.player
    assert game.handle_key(Key.RIGHT) is True
    assert game.moves == 1
    assert game.player is at(game, 2, 1)
    assert game.player.type is TileType.PLAYER
    assert start.type is TileType.EMPTY


def test_move_into_wall_does_not_count():
    game = make_game(SIMPLE)
    start = game.player
    assert game.handle_key(Key.UP) is True
    assert game.moves == 0
    assert game.player is start


def test_unknown_key_ignored():
    game = make_game(SIMPLE)
    assert game.handle_key(97) is False
    assert game.moves == 0


def test_escape_quits():
    game = make_game(SIMPLE)
    with pytest.raises(GameOver) as info:
        game.handle_key(Key.ESC)
    assert info.value.outcome is Outcome.QUIT


def test_pick_coin():
    game = make_game(SIMPLE)
    game.handle_key(Key.RIGHT)
    for _ in range(EFFECT_FRAMES):
        game.tick()
    coin = at(game, 3, 1)
    game.handle_key(Key.RIGHT)
    assert game.collects == 0
    assert game.player is coin
    assert coin.type is TileType.PLAYER
    assert game.effect_pos == coin.position
    assert game.effect_visible
    assert game.player_frame == PLAYER_ACTION
    assert game.moves == 2


def test_exit_blocked_while_coins_remain():
    rows = ["1111111\n", "1CPE001\n", "1111111"]
    game = make_game(rows)
    start = game.player
    game.handle_key(Key.RIGHT)
    assert game.player is start
    assert game.moves == 0
    assert at(game, 3, 1).type is TileType.EXIT


def test_exit_wins_after_all_coins():
    game = make_game(SIMPLE)
    game.handle_key(Key.RIGHT)
    game.handle_key(Key.RIGHT)
    game.handle_key(Key.RIGHT)
    last = game.player
    with pytest.raises(GameOver) as info:
        game.handle_key(Key.RIGHT)
    assert info.value.outcome is Outcome.WIN
    assert game.player is None
    assert last.type is TileType.EMPTY


def test_walking_into_enemy_loses():
    game = make_game(["11111\n", "1PH01\n", "1C0E1\n", "11111"])
    with pytest.raises(GameOver) as info:
        game.handle_key(Key.RIGHT)
    assert info.value.outcome is Outcome.LOSE
    assert game.player is None
    assert game.handle_key(Key.LEFT) is False


ENEMY_ROWS = ["1111111\n", "1P0H001\n", "1C000E1\n", "1111111"]


def test_horizontal_enemy_moves_then_kills():
    game = make_game(ENEMY_ROWS)
    enemy = game.enemies[0]
    assert enemy.type is EnemyType.HORIZONTAL
    old = enemy.tile
    assert game.move_horizontal(enemy) is True
    assert enemy.tile is at(game, 2, 1)
    assert enemy.tile.type is TileType.ENEMY
    assert old.type is TileType.EMPTY
    with pytest.raises(GameOver) as info:
        game.move_horizontal(enemy)
    assert info.value.outcome is Outcome.LOSE
    assert at(game, 1, 1).type is TileType.ENEMY


def test_blocked_enemy_turns_round():
    game = make_game(["11111\n", "1H0P1\n", "1C0E1\n", "11111"])
    enemy = game.enemies[0]
    start = enemy.tile
    assert game.move_horizontal(enemy) is False
    assert enemy.direction == 1
    assert enemy.tile is start
    assert game.move_horizontal(enemy) is True
    assert enemy.tile is at(game, 2, 1)


def test_vertical_enemy():
    game = make_game(["11111\n", "10001\n", "1PV01\n", "1C0E1\n", "11111"])
    enemy = game.enemies[0]
    assert enemy.type is EnemyType.VERTICAL
    assert game.move_vertical(enemy) is True
    assert enemy.tile is at(game, 2, 1)
    assert game.move_vertical(enemy) is False
    assert enemy.direction == 1
    game.move_vertical(enemy)
    assert enemy.tile is at(game, 2, 2)


def test_follower_approaches_and_kills():
    game = make_game(["11111\n", "1P0F1\n", "1C0E1\n", "11111"])
    enemy = game.enemies[0]
    assert enemy.type is EnemyType.FOLLOW
    game.follow_player(enemy)
    assert enemy.tile is at(game, 2, 1)
    assert enemy.tile.type is TileType.FOLLOWER
    with pytest.raises(GameOver) as info:
        game.follow_player(enemy)
    assert info.value.outcome is Outcome.LOSE


def test_follower_falls_back_to_other_axis():
    rows = ["11111\n", "1P001\n", "10011\n", "100F1\n", "1CE01\n", "11111"]
    game = make_game(rows)
    enemy = game.enemies[0]
    game.follow_player(enemy)
    assert enemy.tile is at(game, 2, 3)
    assert enemy.tile.position == (2 * IMG_SIZE, 3 * IMG_SIZE)


def test_move_enemies_waits_for_period():
    game = make_game(ENEMY_ROWS)
    enemy = game.enemies[0]
    start = enemy.tile
    for _ in range(ENEMY_MOVE_PERIOD - 1):
        game.move_enemies()
    assert enemy.tile is start
    game.move_enemies()
    assert enemy.tile is at(game, 2, 1)


def test_tick_moves_enemies_on_period():
    game = make_game(ENEMY_ROWS)
    enemy = game.enemies[0]
    start = enemy.tile
    for _ in range(ENEMY_MOVE_PERIOD - 1):
        game.tick()
    assert enemy.tile is start
    game.tick()
    assert enemy.tile is not start
    assert enemy.tile.type is TileType.ENEMY


def test_effect_fades_after_its_frames():
    game = make_game(SIMPLE)
    assert game.effect_visible
    for _ in range(EFFECT_FRAMES):
        game.tick()
    assert not game.effect_visible
    game.tick()
    assert game.effect_counter == EFFECT_FRAMES


def test_player_leaves_action_frame():
    game = make_game(SIMPLE)
    for _ in range(60):
        game.tick()
    assert game.player_frame != PLAYER_ACTION
    assert game.coin_frame in (0, 1)


def test_window_size_matches_tilemap():
    game = make_game(SIMPLE)
    assert game.window_size == game.tilemap.window_size
    assert game.collects == 1