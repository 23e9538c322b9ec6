from dataclasses import dataclass, field

import pytest

from fumo.components import CircleShape, Render
from fumo.containers import NamedComponentContainer
from fumo.engine_constants import EcsError
from fumo.scheduler_ecs import SchedulerECS
from fumo.settings import RED


@dataclass
class _State:
    ecs: SchedulerECS = field(default_factory=SchedulerECS)


@pytest.fixture
def state():
    st = _State()
    st.ecs.register_component(CircleShape)
    st.ecs.register_component(Render)
    return st


def test_get_returns_added_component(state):
    container = NamedComponentContainer(CircleShape, state)
    shape = CircleShape(radius=3.0)
    entity_id = container.add_component_by_name("big", shape)
    assert container.get_component_by_name("big") is shape
    assert state.ecs.get_component(CircleShape, entity_id) is shape
    assert "big" in container


def test_changes_through_container_are_seen_by_ecs(state):
    container = NamedComponentContainer(CircleShape, state)
    entity_id = container.add_component_by_name("ball", CircleShape(radius=1.0))
    container.get_component_by_name("ball").radius = 7.5
    assert state.ecs.get_component(CircleShape, entity_id).radius == 7.5


def test_wrong_component_type_is_rejected(state):
    container = NamedComponentContainer(CircleShape, state)
    with pytest.raises(EcsError):
        container.add_component_by_name("paint", Render(color=RED))
    assert len(container) == 0


def test_unregistered_component_type_is_rejected(state):
    class Unknown:
        pass

    container = NamedComponentContainer(Unknown, state)
    with pytest.raises(EcsError):
        container.add_component_by_name("x", Unknown())


def test_remove_forgets_name_but_keeps_entity(state):
    container = NamedComponentContainer(CircleShape, state)
    shape = CircleShape(radius=2.0)
    entity_id = container.add_component_by_name("a", shape)
    container.remove_component_by_name("a")
    with pytest.raises(EcsError):
        container.get_component_by_name("a")
    assert state.ecs.get_component(CircleShape, entity_id) is shape


def test_remove_missing_name_raises(state):
    container = NamedComponentContainer(CircleShape, state)
    with pytest.raises(EcsError):
        container.remove_component_by_name("ghost")


def test_taken_name_keeps_first_entity(state):
    container = NamedComponentContainer(CircleShape, state)
    first = CircleShape(radius=1.0)
    container.add_component_by_name("dup", first)
    container.add_component_by_name("dup", CircleShape(radius=9.0))
    assert container.get_component_by_name("dup") is first
    assert len(container) == 1