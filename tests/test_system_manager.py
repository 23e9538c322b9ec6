import pytest

from fumo.engine_constants import EcsError, System
from fumo.entity_query import EntityQuery, Filter
from fumo.system_manager import SystemManager

A = 1 << 0
B = 1 << 1


class MoverSystem(System):
    def sys_call(self):
        self.awake = False


class DrawSystem(System):
    def sys_call(self):
        self.awake = False


@pytest.fixture
def setup():
    manager = SystemManager()
    mover = MoverSystem()
    drawer = DrawSystem()
    manager.register_system(MoverSystem, EntityQuery(A | B, Filter.ALL), mover)
    manager.register_system(DrawSystem, EntityQuery(A, Filter.ANY), drawer)
    return manager, mover, drawer


def test_matching_entities_are_added(setup):
    manager, mover, drawer = setup
    manager.entity_component_mask_changed(7, A)
    assert mover.sys_entities == set()
    assert drawer.sys_entities == {7}
    manager.entity_component_mask_changed(7, A | B)
    assert mover.sys_entities == {7}
    assert drawer.sys_entities == {7}


def test_entities_leave_when_no_longer_matching(setup):
    manager, mover, drawer = setup
    manager.entity_component_mask_changed(7, A | B)
    manager.entity_component_mask_changed(7, B)
    assert mover.sys_entities == set()
    assert drawer.sys_entities == set()


def test_destroyed_entity_is_removed_everywhere(setup):
    manager, mover, drawer = setup
    manager.entity_component_mask_changed(7, A | B)
    manager.entity_component_mask_changed(8, A)
    manager.notify_destroyed_entity(7)
    assert mover.sys_entities == set()
    assert drawer.sys_entities == {8}


def test_get_registered_system(setup):
    manager, mover, _ = setup
    assert manager.get_system(MoverSystem) is mover


def test_unregistered_system_takes_precedence(setup):
    manager, mover, _ = setup
    other = MoverSystem()
    manager.add_unregistered_system(MoverSystem, other)
    assert manager.get_system(MoverSystem) is other


def test_unregistered_system_gets_no_entity_updates():
    manager = SystemManager()
    loose = MoverSystem()
    manager.add_unregistered_system(MoverSystem, loose)
    manager.entity_component_mask_changed(3, A | B)
    assert loose.sys_entities == set()
    assert manager.get_system(MoverSystem) is loose


def test_missing_system_raises():
    with pytest.raises(EcsError):
        SystemManager().get_system(MoverSystem)


def test_registering_twice_raises(setup):
    manager, _, _ = setup
    with pytest.raises(EcsError):
        manager.register_system(MoverSystem, EntityQuery(A, Filter.ALL), MoverSystem())


def test_adding_unregistered_twice_raises():
    manager = SystemManager()
    manager.add_unregistered_system(DrawSystem, DrawSystem())
    with pytest.raises(EcsError):
        manager.add_unregistered_system(DrawSystem, DrawSystem())


def test_debug_print_names_systems(setup, capsys):
    manager, _, _ = setup
    manager.add_unregistered_system(DrawSystem, DrawSystem())
    manager.debug_print()
    err = capsys.readouterr().err
    assert "MoverSystem" in err
    assert "unregistered_systems ---> ['DrawSystem']" in err