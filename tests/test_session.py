import pytest

from core.state import JoystickGeometry, PointerEvent, PointerKind, Source, Vector2
from session import JoystickSession

GEOM = JoystickGeometry(100, 100, 160, 64)


def ev(kind, x=None, y=None, pointer_id="mouse"):
    return PointerEvent(kind, x, y, pointer_id)


@pytest.fixture
def calls():
    return []


@pytest.fixture
def session(calls):
    return JoystickSession(
        Source.LEFT,
        on_move=lambda src, vec: calls.append(("move", src, vec)),
        on_stop=lambda src: calls.append(("stop", src)),
    )


def test_starts_idle(session):
    assert not session.dragging
    assert session.vector == Vector2.ZERO


def test_start_emits_initial_vector(session, calls):
    assert session.start(ev(PointerKind.START, 148, 100), GEOM)
    assert session.dragging
    assert calls == [("move", Source.LEFT, Vector2(1.0, 0.0))]


def test_every_move_sample_is_reported(session, calls):
    session.start(ev(PointerKind.START, 100, 100), GEOM)
    for _ in range(5):
        session.move(ev(PointerKind.MOVE, 124, 76), GEOM)
    moves = [c for c in calls if c[0] == "move"]
    assert len(moves) == 6
    assert session.vector == moves[-1][2]


def test_vector_is_current_inside_move_callback():
    seen = []
    s = JoystickSession(Source.RIGHT, on_move=lambda src, vec: seen.append(s.vector == vec))
    s.start(ev(PointerKind.START, 130, 90), GEOM)
    s.move(ev(PointerKind.MOVE, 70, 120), GEOM)
    assert seen == [True, True]


def test_end_resets_vector_and_emits_stop(session, calls):
    session.start(ev(PointerKind.START, 130, 90), GEOM)
    assert session.end(ev(PointerKind.END))
    assert not session.dragging
    assert session.vector == Vector2.ZERO
    assert calls[-1] == ("stop", Source.LEFT)


def test_move_while_idle_is_ignored(session, calls):
    assert not session.move(ev(PointerKind.MOVE, 130, 90), GEOM)
    assert calls == []
    assert session.vector == Vector2.ZERO


def test_end_while_idle_is_ignored(session, calls):
    assert not session.end(ev(PointerKind.END))
    assert calls == []


def test_malformed_events_change_nothing(session, calls):
    assert not session.start(ev(PointerKind.START, None, None), GEOM)
    assert not session.dragging
    session.start(ev(PointerKind.START, 130, 90), GEOM)
    before = session.vector
    assert not session.move(ev(PointerKind.MOVE, None, 50), GEOM)
    assert session.vector == before
    assert len(calls) == 1


def test_missing_geometry_is_a_noop(session, calls):
    assert not session.start(ev(PointerKind.START, 130, 90), None)
    assert not session.dragging
    assert calls == []


def test_only_the_originating_pointer_drives_the_drag(session, calls):
    session.start(ev(PointerKind.START, 130, 90, pointer_id=(0, 1)), GEOM)
    assert not session.move(ev(PointerKind.MOVE, 70, 70, pointer_id=(0, 2)), GEOM)
    assert not session.end(ev(PointerKind.END, pointer_id=(0, 2)))
    assert session.dragging
    assert not session.start(ev(PointerKind.START, 70, 70, pointer_id=(0, 2)), GEOM)
    assert session.end(ev(PointerKind.END, pointer_id=(0, 1)))
    assert len([c for c in calls if c[0] == "move"]) == 1
