import pytest

from rustdrill.drills.enums import ChangeColor, Echo, Move, Point, Quit, State


def test_match_message_call(capsys):
    state = State(quit=False, position=Point(0, 0), color=(0, 0, 0))
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert capsys.readouterr().out == "hello world\n"


def test_default_state():
    state = State()
    assert state.color == (0, 0, 0)
    assert state.position == Point(0, 0)
    assert state.quit is False


def test_unknown_message_is_rejected():
    with pytest.raises(TypeError):
        State().process("jump")


@pytest.mark.parametrize("coords", [(256, 0), (0, -1)])
def test_point_out_of_range(coords):
    with pytest.raises(ValueError):
        Point(*coords)


def test_change_color_out_of_range():
    with pytest.raises(ValueError):
        ChangeColor(0, 300, 0)


def test_later_messages_override_earlier():
    state = State()
    state.process(Move(Point(1, 2)))
    state.process(Move(Point(3, 4)))
    assert state.position == Point(3, 4)
    assert state.quit is False