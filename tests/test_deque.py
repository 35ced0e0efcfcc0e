import io

import pytest

from structlab.deque import Deque, main


def run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    status = main([])
    return status, capsys.readouterr().out


def test_push_both_ends_order():
    dq = Deque()
    dq.push_back(2)
    dq.push_front(1)
    dq.push_back(3)
    assert list(dq) == [1, 2, 3]
    assert dq.peek_front() == 1
    assert dq.peek_back() == 3


def test_pop_both_ends():
    dq = Deque([1, 2, 3])
    assert dq.pop_back() == 3
    assert dq.pop_front() == 1
    assert list(dq) == [2]
    assert dq.pop_back() == 2
    assert dq.is_empty()


def test_single_element_pop_back_leaves_empty():
    dq = Deque()
    dq.push_front("only")
    assert dq.pop_back() == "only"
    assert len(dq) == 0
    dq.push_back("again")
    assert dq.peek_front() == "again"


@pytest.mark.parametrize("method", ["pop_front", "pop_back", "peek_front", "peek_back"])
def test_empty_operations_raise(method):
    with pytest.raises(IndexError):
        getattr(Deque(), method)()


def test_len_matches_iteration():
    dq = Deque(range(5))
    dq.push_front(-1)
    dq.pop_back()
    assert len(dq) == len(list(dq))


def test_str_format():
    assert str(Deque([4, 5])) == "4->5->"


def test_main_session(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, "e 2\nE 3\ne 1\np\nP\nS\n@\nd\nD\nx\n")
    assert status == 0
    assert "Front of the queue is 1\n" in out
    assert "Back of the queue is 3\n" in out
    assert "Size: 3\n" in out
    assert "1->2->3->\n" in out
    assert "Removed number at front: 1\n" in out
    assert "Removed number at back: 3\n" in out
    assert out.endswith("Exiting")


def test_main_empty_deque(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "p P d D X")
    assert out.count("Queue is empty!\n") == 2
    assert "Removed number at front: -1\n" in out
    assert "Removed number at back: -1\n" in out
    assert out.endswith("Exiting")


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, "")
    assert status == 0
    assert out == "Enter operation: "