import logging

import pytest

from tictactoe.app.event_bus import EventBus
from tictactoe.app.events import (
    GameStartedEvent,
    MoveAppliedEvent,
    RoundEndedEvent,
    RoundRestartedEvent,
    ScoreResetEvent,
)
from tictactoe.app.game_service import GameService
from tictactoe.engine.actions import PlaceMark, ResetAll, Restart
from tictactoe.engine.state import InvalidCellError, Mark, Outcome, Score


def _started_service() -> tuple[GameService, list[object]]:
    bus = EventBus()
    events: list[object] = []
    bus.subscribe(events.append)
    service = GameService(event_bus=bus)
    service.start_new_game()
    return service, events


def test_event_bus_publish_and_unsubscribe() -> None:
    bus = EventBus()
    received: list[tuple[str, object]] = []

    unsubscribe_a = bus.subscribe(lambda event: received.append(("a", event)))
    unsubscribe_b = bus.subscribe(lambda event: received.append(("b", event)))

    bus.publish("hello")
    assert received == [("a", "hello"), ("b", "hello")]

    received.clear()
    unsubscribe_a()
    unsubscribe_a()  # idempotent
    bus.publish("world")
    assert received == [("b", "world")]

    received.clear()
    unsubscribe_b()
    bus.publish("ignored")
    assert received == []


def test_event_bus_propagates_subscriber_errors() -> None:
    bus = EventBus()

    def _boom(event: object) -> None:
        raise RuntimeError("boom")

    bus.subscribe(_boom)

    with pytest.raises(RuntimeError):
        bus.publish("event")


def test_state_requires_started_game() -> None:
    service = GameService()

    with pytest.raises(RuntimeError):
        _ = service.state


def test_start_new_game_emits_started_event() -> None:
    service, events = _started_service()

    assert len(events) == 1
    assert isinstance(events[0], GameStartedEvent)
    assert events[0].state is service.state
    assert service.legal_moves() == list(range(9))


def test_apply_move_emits_move_applied_event() -> None:
    service, events = _started_service()
    previous = service.state

    new_state = service.apply_move(4)

    applied = events[-1]
    assert isinstance(applied, MoveAppliedEvent)
    assert applied.index == 4
    assert applied.previous_state is previous
    assert applied.new_state is new_state
    assert service.state.board[4] is Mark.X


def test_ignored_move_publishes_nothing(caplog: pytest.LogCaptureFixture) -> None:
    service, events = _started_service()
    service.apply_move(4)
    count = len(events)
    before = service.state

    with caplog.at_level(logging.DEBUG, logger="tictactoe.app.game_service"):
        after = service.apply_move(4)

    assert after is before
    assert len(events) == count
    assert any("ignoré" in record.getMessage() for record in caplog.records)


def test_invalid_index_propagates() -> None:
    service, events = _started_service()

    with pytest.raises(InvalidCellError):
        service.apply_move(9)
    assert len(events) == 1


def test_winning_move_emits_round_ended_once() -> None:
    service, events = _started_service()

    for index in (0, 3, 1, 4, 2):
        service.apply_move(index)

    ended = [event for event in events if isinstance(event, RoundEndedEvent)]
    assert len(ended) == 1
    assert ended[0].outcome is Outcome.X_WINS
    assert ended[0].winning_line == (0, 1, 2)
    assert service.state.score == Score(x=1)

    # Clics supplémentaires sur une manche terminée: aucun effet
    service.apply_move(8)
    assert len([event for event in events if isinstance(event, RoundEndedEvent)]) == 1
    assert service.state.score == Score(x=1)


def test_restart_and_reset_all_events() -> None:
    service, events = _started_service()
    for index in (0, 3, 1, 4, 2):
        service.apply_move(index)

    restarted = service.restart()
    assert isinstance(events[-1], RoundRestartedEvent)
    assert events[-1].new_state is restarted
    assert restarted.score == Score(x=1)
    assert restarted.move_count == 0

    reset = service.reset_all()
    assert isinstance(events[-1], ScoreResetEvent)
    assert events[-1].previous_state is restarted
    assert reset.score == Score()


def test_dispatch_routes_actions() -> None:
    service, _ = _started_service()

    service.dispatch(PlaceMark(0))
    assert service.state.board[0] is Mark.X

    service.dispatch(Restart())
    assert service.state.move_count == 0

    service.dispatch(ResetAll())
    assert service.state.score == Score()

    with pytest.raises(TypeError):
        service.dispatch("restart")  # type: ignore[arg-type]


def test_snapshot_reflects_current_state() -> None:
    service, _ = _started_service()
    service.apply_move(0)

    snapshot = service.snapshot()

    assert snapshot["board"][0] == "X"
    assert snapshot["current_player"] == "O"
    assert snapshot["outcome"] == "IN_PROGRESS"
    assert snapshot["score"] == {"X": 0, "O": 0, "Draws": 0}


def test_round_end_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    service, _ = _started_service()

    with caplog.at_level(logging.INFO, logger="tictactoe.app.game_service"):
        for index in (0, 1, 2, 4, 3, 5, 7, 6, 8):
            service.apply_move(index)

    assert service.state.outcome is Outcome.DRAW
    assert any("DRAW" in record.getMessage() for record in caplog.records)
