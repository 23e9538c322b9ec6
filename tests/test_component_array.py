import pytest

from fumo.component_array import ComponentArray
from fumo.engine_constants import EcsError


@pytest.fixture
def filled():
    array = ComponentArray()
    array.add_component_data(10, "a")
    array.add_component_data(11, "b")
    array.add_component_data(12, "c")
    return array


def test_add_then_get(filled):
    assert filled.get_component_data(11) == "b"
    assert len(filled) == 3


def test_adding_twice_raises(filled):
    with pytest.raises(EcsError):
        filled.add_component_data(10, "again")


def test_remove_keeps_other_components_reachable(filled):
    filled.remove_component_data(10)
    assert 10 not in filled
    assert filled.get_component_data(11) == "b"
    assert filled.get_component_data(12) == "c"
    assert len(filled) == 2


def test_remove_last_element(filled):
    filled.remove_component_data(12)
    assert [filled.get_component_data(e) for e in (10, 11)] == ["a", "b"]
    assert 12 not in filled


def test_remove_missing_raises(filled):
    with pytest.raises(EcsError):
        filled.remove_component_data(99)


def test_get_missing_raises(filled):
    with pytest.raises(EcsError):
        filled.get_component_data(99)


def test_entity_destroyed_ignores_missing_entity(filled):
    filled.entity_destroyed(99)
    assert len(filled) == 3


def test_entity_destroyed_removes_present_entity(filled):
    filled.entity_destroyed(11)
    assert 11 not in filled
    assert filled.get_component_data(12) == "c"


def test_get_returns_same_object():
    array = ComponentArray()
    payload = {"hp": 5}
    array.add_component_data(1, payload)
    array.get_component_data(1)["hp"] = 7
    assert array.get_component_data(1) == {"hp": 7}


def test_capacity_is_enforced():
    array = ComponentArray(capacity=2)
    array.add_component_data(1, "x")
    array.add_component_data(2, "y")
    with pytest.raises(EcsError):
        array.add_component_data(3, "z")


def test_readding_after_removal_works(filled):
    filled.remove_component_data(10)
    filled.add_component_data(10, "new")
    assert filled.get_component_data(10) == "new"
    assert filled.get_component_data(12) == "c"