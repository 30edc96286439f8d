from skygate.core.events import EventBus, EventType
from skygate.core.state import GameState


def test_initial_values(state: GameState) -> None:
    assert state.game_over is False
    assert state.score == 0
    assert state.is_invincible is False
    assert state.invincible_until is None
    assert state.difficulty == 1.0
    assert state.last_spawn_time == 0.0


def test_record_pass_updates_score_high_score_and_difficulty(state: GameState) -> None:
    for _ in range(20):
        state.record_pass()
    assert state.score == 20
    assert state.high_score == 20
    assert state.difficulty == min(1 + (20 / 20) * 0.2, 2.0)


def test_high_score_only_rises(bus: EventBus) -> None:
    state = GameState(high_score=5, event_bus=bus)
    for _ in range(5):
        state.record_pass()
    assert state.high_score == 5
    assert bus.get_history(EventType.HIGH_SCORE) == []

    state.record_pass()
    assert state.high_score == 6
    events = bus.get_history(EventType.HIGH_SCORE)
    assert [e.data["high_score"] for e in events] == [6]


def test_reset_keeps_high_score(state: GameState) -> None:
    for _ in range(3):
        state.record_pass()
    state.end_game()
    state.activate_invincibility(100.0, 5000.0)
    state.last_spawn_time = 900.0

    state.reset()

    assert state.score == 0
    assert state.high_score == 3
    assert state.game_over is False
    assert state.is_invincible is False
    assert state.invincible_until is None
    assert state.difficulty == 1.0
    assert state.last_spawn_time == 0.0


def test_end_game_publishes_once(state: GameState, bus: EventBus) -> None:
    state.end_game("ground")
    state.end_game("pipe")
    events = bus.get_history(EventType.GAME_OVER)
    assert len(events) == 1
    assert events[0].data["reason"] == "ground"


def test_invincibility_expires_at_deadline(state: GameState) -> None:
    state.activate_invincibility(1000.0, 5000.0)
    assert state.expire_invincibility(5999.0) is False
    assert state.is_invincible is True
    assert state.expire_invincibility(6000.0) is True
    assert state.is_invincible is False
    assert state.invincible_until is None


def test_second_pickup_restarts_window(state: GameState, bus: EventBus) -> None:
    state.activate_invincibility(1000.0, 5000.0)
    state.activate_invincibility(4000.0, 5000.0)

    assert state.invincible_until == 9000.0
    assert state.expire_invincibility(6000.0) is False
    assert state.is_invincible is True
    assert state.expire_invincibility(9000.0) is True

    started = bus.get_history(EventType.INVINCIBILITY_STARTED)
    assert [e.data["restarted"] for e in started] == [False, True]
    assert len(bus.get_history(EventType.INVINCIBILITY_ENDED)) == 1


def test_expire_without_window_is_noop(state: GameState) -> None:
    assert state.expire_invincibility(10_000.0) is False


def test_works_without_event_bus() -> None:
    state = GameState()
    state.record_pass()
    state.end_game()
    assert state.score == 1
    assert state.game_over is True
