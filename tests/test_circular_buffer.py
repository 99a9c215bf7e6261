import pytest

from zlspectrum.circular_buffer import CircularBuffer


def test_capacity_rounds_to_power_of_two_minus_one():
    assert CircularBuffer(3).capacity == 3
    assert CircularBuffer(4).capacity == 7


def test_push_back_pop_front_is_fifo():
    buf = CircularBuffer(4)
    for value in [10, 20, 30]:
        buf.push_back(value)
    assert len(buf) == 3
    assert buf.front == 10
    assert buf.back == 30
    assert [buf.pop_front() for _ in range(3)] == [10, 20, 30]
    assert buf.is_empty


def test_pop_back_is_lifo():
    buf = CircularBuffer(4)
    for value in [1, 2, 3]:
        buf.push_back(value)
    assert [buf.pop_back() for _ in range(3)] == [3, 2, 1]


def test_push_back_overflow_drops_front():
    buf = CircularBuffer(3)
    for value in range(5):
        buf.push_back(value)
    assert list(buf) == [2, 3, 4]
    assert len(buf) == buf.capacity


def test_push_front_overflow_drops_back():
    buf = CircularBuffer(3)
    for value in range(5):
        buf.push_front(value)
    assert list(buf) == [4, 3, 2]


def test_push_front_then_back_order():
    buf = CircularBuffer(7)
    buf.push_back("b")
    buf.push_front("a")
    buf.push_back("c")
    assert [buf[i] for i in range(len(buf))] == ["a", "b", "c"]


def test_indexing_out_of_range_raises():
    buf = CircularBuffer(3)
    buf.push_back(1)
    assert buf[0] == 1
    with pytest.raises(IndexError):
        buf[1]


@pytest.mark.parametrize("op", ["pop_back", "pop_front"])
def test_pop_empty_raises(op):
    buf = CircularBuffer(3)
    buf.push_back(7)
    assert getattr(buf, op)() == 7
    assert len(buf) == 0
    with pytest.raises(IndexError):
        getattr(buf, op)()


def test_front_of_empty_raises():
    with pytest.raises(IndexError):
        CircularBuffer(3).front


def test_clear_empties():
    buf = CircularBuffer(3)
    buf.push_back(1)
    buf.push_back(2)
    buf.clear()
    assert buf.is_empty
    assert list(buf) == []


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        CircularBuffer(-1)