from dataclasses import dataclass, field

import pytest

from fumo.components import Body, CircleShape, GravityField, Render, Vector2
from fumo.engine_constants import EcsError, System
from fumo.entity_query import EntityQuery, Filter
from fumo.planet_factory import DEFAULT_GRAV_STRENGTH, EntityFactory, PlanetFactory
from fumo.scheduler_ecs import SchedulerECS
from fumo.settings import ALL_COLORS, BLUE, DEFAULT_PLANET_RADIUS, DEFAULT_RADIUS


@dataclass
class _State:
    ecs: SchedulerECS = field(default_factory=SchedulerECS)
    frametime: float = 1.0


class _FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


class _Watcher(System):
    def sys_call(self):
        pass


@pytest.fixture
def state():
    state = _State()
    for component_type in (Body, Render, CircleShape, GravityField):
        state.ecs.register_component(component_type)
    return state


def test_entity_factory_is_abstract():
    with pytest.raises(TypeError):
        EntityFactory()


def test_create_planet_attaches_components(state):
    factory = PlanetFactory(state)
    position = Vector2(10.0, 20.0)
    velocity = Vector2(1.0, 2.0)
    entity_id = factory.create_planet(30.0, 100.0, velocity, position, BLUE, 70.0, 5.0)
    ecs = state.ecs
    body = ecs.get_component(Body, entity_id)
    assert body.position == position
    assert body.velocity == velocity
    assert ecs.get_component(Render, entity_id).color == BLUE
    assert ecs.get_component(CircleShape, entity_id).radius == 30.0
    field_ = ecs.get_component(GravityField, entity_id)
    assert (field_.gravity_radius, field_.gravity_strength) == (70.0, 5.0)
    assert entity_id not in factory.sys_entities


def test_create_default_planet_uses_defaults(state):
    rng = _FixedRng(3)
    factory = PlanetFactory(state, rng)
    position = Vector2(50.0, 60.0)
    entity_id = factory.create_default_planet(position)
    ecs = state.ecs
    assert entity_id in factory.sys_entities
    assert ecs.get_component(Body, entity_id).position == position
    assert ecs.get_component(Body, entity_id).velocity == Vector2()
    assert ecs.get_component(Render, entity_id).color == ALL_COLORS[3]
    assert ecs.get_component(CircleShape, entity_id).radius == DEFAULT_RADIUS
    field_ = ecs.get_component(GravityField, entity_id)
    assert field_.gravity_radius == DEFAULT_PLANET_RADIUS
    assert field_.gravity_strength == pytest.approx(DEFAULT_GRAV_STRENGTH)
    assert rng.calls == [(0, len(ALL_COLORS) - 1)]


def test_planets_reach_matching_systems(state):
    ecs = state.ecs
    query = EntityQuery(
        ecs.make_component_mask(Body, Render, CircleShape, GravityField), Filter.ONLY
    )
    watcher = ecs.register_system_unscheduled(_Watcher, query)
    factory = PlanetFactory(state, _FixedRng(0))
    entity_id = factory.create_default_planet(Vector2())
    assert watcher.sys_entities == {entity_id}
    factory.delete_planet(entity_id)
    assert watcher.sys_entities == set()


def test_delete_planet_destroys_entity(state):
    factory = PlanetFactory(state, _FixedRng(0))
    kept = factory.create_default_planet(Vector2(1.0, 1.0))
    removed = factory.create_default_planet(Vector2(2.0, 2.0))
    factory.delete_planet(removed)
    assert factory.sys_entities == {kept}
    with pytest.raises(EcsError):
        state.ecs.get_component(Body, removed)
    assert state.ecs.get_component(Body, kept).position == Vector2(1.0, 1.0)


def test_delete_all_planets_keeps_untracked(state):
    factory = PlanetFactory(state, _FixedRng(0))
    other = factory.create_planet(
        10.0, 1.0, Vector2(), Vector2(9.0, 9.0), BLUE, 1.0, 1.0
    )
    created = [factory.create_default_planet(Vector2()) for _ in range(3)]
    factory.delete_all_planets()
    assert factory.sys_entities == set()
    for entity_id in created:
        with pytest.raises(EcsError):
            state.ecs.get_component(CircleShape, entity_id)
    assert state.ecs.get_component(Body, other).position == Vector2(9.0, 9.0)