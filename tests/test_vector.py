import pytest

from structlab.vector import Vector


def test_default_vector_is_empty_with_spare_capacity():
    vector = Vector()
    assert len(vector) == 0
    assert vector.capacity == Vector.SPARE_CAPACITY
    assert list(vector) == []


def test_sized_vector():
    vector = Vector(5)
    assert len(vector) == 5
    assert vector.capacity == 5 + Vector.SPARE_CAPACITY
    assert list(vector) == [None] * 5


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Vector(-1)


def test_push_back_grows_past_capacity():
    vector = Vector()
    values = list(range(100))
    for value in values:
        vector.push_back(value)
        assert vector.capacity >= len(vector)
    assert list(vector) == values
    assert vector.back() == 99


def test_indexing_and_assignment():
    vector = Vector()
    for value in "abc":
        vector.push_back(value)
    vector[1] = "z"
    assert vector[1] == "z"
    assert vector[-1] == "c"
    assert list(vector) == ["a", "z", "c"]


@pytest.mark.parametrize("index", [3, -4, 100])
def test_index_out_of_range(index):
    vector = Vector(3)
    with pytest.raises(IndexError):
        vector[index]
    with pytest.raises(IndexError):
        vector[index] = 1
    assert list(vector) == [None, None, None]
    assert len(vector) == 3


def test_pop_back_returns_last():
    vector = Vector()
    vector.push_back(1)
    vector.push_back(2)
    assert vector.pop_back() == 2
    assert list(vector) == [1]


def test_empty_pop_and_back_raise():
    with pytest.raises(IndexError):
        Vector().pop_back()
    with pytest.raises(IndexError):
        Vector().back()


def test_reserve_below_size_is_ignored():
    vector = Vector(10)
    before = vector.capacity
    vector.reserve(5)
    assert vector.capacity == before


def test_reserve_sets_capacity_and_keeps_items():
    vector = Vector()
    vector.push_back("x")
    vector.reserve(200)
    assert vector.capacity == 200
    assert list(vector) == ["x"]


def test_resize_grows_beyond_capacity():
    vector = Vector()
    vector.push_back(1)
    vector.resize(50)
    assert len(vector) == 50
    assert vector.capacity >= 50
    assert vector[0] == 1
    assert vector[49] is None


def test_resize_shrinks():
    vector = Vector()
    for value in range(5):
        vector.push_back(value)
    vector.resize(2)
    assert list(vector) == [0, 1]
    vector.resize(4)
    assert list(vector) == [0, 1, None, None]