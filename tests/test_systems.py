import math
from dataclasses import dataclass, field

import pytest

from fumo.components import Body, Vector2
from fumo.scheduler_ecs import SchedulerECS
from fumo.systems import BodyMovement, Debugger


@dataclass
class _State:
    ecs: SchedulerECS = field(default_factory=SchedulerECS)
    frametime: float = 1.0


@pytest.fixture
def state():
    return _State()


@pytest.fixture
def movement(state):
    return BodyMovement(state)


def test_update_position_adds_velocity(movement):
    body = Body(position=Vector2(10.0, 20.0), velocity=Vector2(3.0, -4.0))
    movement.update_position(body)
    assert body.position == Vector2(13.0, 16.0)


def test_reset_velocity(movement):
    body = Body(velocity=Vector2(3.0, -4.0))
    movement.reset_velocity(body)
    assert body.velocity == Vector2()


def test_vertical_moves_cancel(movement):
    body = Body()
    movement.move_vertically(body, 1.0)
    assert body.velocity.dot(body.gravity_direction) < 0
    movement.move_vertically(body, -1.0)
    assert body.velocity == Vector2()


def test_horizontal_move_is_perpendicular_to_gravity(movement):
    body = Body(gravity_direction=Vector2(0.6, 0.8))
    movement.move_horizontally(body, 1.0)
    assert body.velocity.dot(body.gravity_direction) == pytest.approx(0.0)
    assert body.velocity.length() > 0


def test_jump_sets_flags_and_pushes_up(movement):
    body = Body()
    movement.jump(body)
    assert body.jumping and body.going_up
    assert body.velocity.x == 0
    assert body.velocity.dot(body.gravity_direction) < 0


def test_jump_scales_with_frametime(state, movement):
    first = Body()
    movement.jump(first)
    state.frametime = 2.0
    second = Body()
    movement.jump(second)
    assert second.velocity.length() == pytest.approx(2 * first.velocity.length())


def test_move_towards_position_points_at_target(movement):
    body = Body(position=Vector2(0.0, 0.0))
    target = Vector2(3.0, 4.0)
    movement.move_towards_position(body, target)
    direction = body.velocity.normalized()
    assert direction.x == pytest.approx(0.6)
    assert direction.y == pytest.approx(0.8)
    assert body.velocity.length() == pytest.approx(target.distance_sqr_to(Vector2()))


def test_move_towards_grows_with_squared_distance(movement):
    near = Body(position=Vector2())
    far = Body(position=Vector2())
    movement.move_towards(near, Body(position=Vector2(1.0, 1.0)))
    movement.move_towards(far, Body(position=Vector2(2.0, 2.0)))
    assert far.velocity.length() == pytest.approx(4 * near.velocity.length())


def test_move_towards_own_position_stops(movement):
    body = Body(position=Vector2(5.0, 5.0), velocity=Vector2(1.0, 1.0))
    movement.move_towards_position(body, Vector2(5.0, 5.0))
    assert body.velocity == Vector2()
    assert not math.isnan(body.velocity.x)


def test_debugger_prints_ecs_state(state, capsys):
    debugger = Debugger(state)
    debugger.sys_call()
    err = capsys.readouterr().err
    assert "all_entity_ids_debug" in err
    assert "system_scheduler" in err