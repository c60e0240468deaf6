from solong.animation import Animator, FrameEvent, Sprite
from solong.game import Game

COIN_MAP = ["111111", "1P0C01", "10E001", "111111"]
TWO_COINS = ["111111", "1PC0C1", "10E001", "111111"]
NO_COINS = ["11111", "1P0E1", "11111"]
LEFT_PLAYER = ["11111", "120E1", "11111"]


def _run(animator, game, ticks):
    events = []
    for _ in range(ticks):
        events.extend(animator.tick(game))
    return events


def test_nothing_drawn_before_first_step():
    game = Game(COIN_MAP, bonus=True)
    animator = Animator()
    assert _run(animator, game, 9) == []


def test_tenth_tick_draws_first_frames():
    game = Game(COIN_MAP, bonus=True)
    animator = Animator()
    _run(animator, game, 9)
    events = animator.tick(game)
    assert FrameEvent(Sprite.PLAYER, 1, 1, 1) in events
    assert FrameEvent(Sprite.COIN, 1, 3, 1) in events


def test_coin_cycle_shows_each_frame_once_in_order():
    game = Game(COIN_MAP, bonus=True)
    animator = Animator()
    events = _run(animator, game, 61)
    coin_frames = [e.frame for e in events if e.sprite is Sprite.COIN]
    assert coin_frames == list(range(1, 7))


def test_player_cycle_shows_each_frame_once_in_order():
    game = Game(COIN_MAP, bonus=True)
    animator = Animator()
    events = _run(animator, game, 51)
    player_frames = [e.frame for e in events if e.sprite is Sprite.PLAYER]
    assert player_frames == list(range(1, 6))


def test_coin_cycle_repeats_after_wrapping():
    game = Game(COIN_MAP, bonus=True)
    animator = Animator()
    first = [e for e in _run(animator, game, 61) if e.sprite is Sprite.COIN]
    second = [e for e in _run(animator, game, 61) if e.sprite is Sprite.COIN]
    assert first == second


def test_shared_coin_counter_moves_once_per_coin():
    game = Game(TWO_COINS, bonus=True)
    animator = Animator()
    events = _run(animator, game, 5)
    coins = [e for e in events if e.sprite is Sprite.COIN]
    assert coins == [FrameEvent(Sprite.COIN, 1, 4, 1)]


def test_left_facing_player_uses_its_own_sprite():
    game = Game(LEFT_PLAYER, bonus=True)
    animator = Animator()
    events = _run(animator, game, 10)
    assert FrameEvent(Sprite.PLAYER_LEFT, 1, 1, 1) in events
    assert all(e.sprite is not Sprite.PLAYER for e in events)


def test_box_stays_closed_while_coins_remain():
    game = Game(COIN_MAP, bonus=True)
    animator = Animator()
    events = _run(animator, game, 400)
    assert all(e.sprite is not Sprite.BOX for e in events)
    assert game.cell(2, 2) == "E"


def test_box_opens_after_its_animation():
    game = Game(NO_COINS, bonus=True)
    animator = Animator()
    events = _run(animator, game, 299)
    assert game.cell(3, 1) == "E"
    events += animator.tick(game)
    assert game.cell(3, 1) == "e"
    box_frames = [e.frame for e in events if e.sprite is Sprite.BOX]
    assert box_frames == list(range(1, 11))
    assert all((e.x, e.y) == (3, 1) for e in events if e.sprite is Sprite.BOX)


def test_opened_box_is_not_animated_again():
    game = Game(NO_COINS, bonus=True)
    animator = Animator()
    _run(animator, game, 300)
    later = _run(animator, game, 300)
    assert all(e.sprite is not Sprite.BOX for e in later)
    assert game.cell(3, 1) == "e"


def test_opened_box_still_lets_player_win():
    game = Game(NO_COINS, bonus=True)
    animator = Animator()
    _run(animator, game, 300)
    from solong.game import Direction, MoveResult

    assert game.step(Direction.RIGHT) is MoveResult.MOVED
    assert game.step(Direction.RIGHT) is MoveResult.WON