import pytest

from elements import (
    Element,
    Visual,
    generate_random_array,
    elements_from_values,
    MIN_VALUE,
    MAX_VALUE,
)


def test_generate_defaults():
    elements = generate_random_array(50)
    assert len(elements) == 50
    assert all(MIN_VALUE <= e.value <= MAX_VALUE for e in elements)
    assert all(e.state == Visual.DEFAULT for e in elements)
    assert [e.uid for e in elements] == list(range(50))


def test_generate_is_seedable():
    first = [e.value for e in generate_random_array(20, seed=5)]
    second = [e.value for e in generate_random_array(20, seed=5)]
    assert first == second


def test_generate_edge_cases():
    assert generate_random_array(0) == []
    assert [e.value for e in generate_random_array(3, low=4, high=4)] == [4, 4, 4]
    with pytest.raises(ValueError):
        generate_random_array(-1)
    with pytest.raises(ValueError):
        generate_random_array(5, low=10, high=1)


def test_element_copy_and_dict():
    element = Element(12, Visual.PIVOT, uid=3)
    clone = element.copy(Visual.SORTED)
    assert clone.value == 12 and clone.uid == 3
    assert clone.is_sorted
    assert element.state == Visual.PIVOT
    assert Element.from_dict(element.to_dict()) == element


def test_elements_from_values():
    elements = elements_from_values([3, 1])
    assert elements == [Element(3, uid=0), Element(1, uid=1)]
