import pytest

from adtkit.queues import ArrayQueue, QueueEmptyError


def test_fifo_order():
    queue = ArrayQueue()
    for elem in "abcdef":
        queue.enqueue(elem)
    assert [queue.dequeue() for _ in range(6)] == list("abcdef")
    assert queue.is_empty()


def test_front_does_not_remove():
    queue = ArrayQueue()
    queue.enqueue("x")
    queue.enqueue("y")
    assert queue.front() == "x"
    assert len(queue) == 2


def test_front_stays_first_while_enqueuing():
    queue = ArrayQueue()
    for count, elem in enumerate("abc", start=1):
        queue.enqueue(elem)
        assert queue.front() == "a"
        assert len(queue) == count


def test_dequeue_empty_raises():
    with pytest.raises(QueueEmptyError):
        ArrayQueue().dequeue()


def test_front_empty_raises():
    with pytest.raises(QueueEmptyError):
        ArrayQueue().front()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        ArrayQueue().dequeue()


def test_clear_empties_queue():
    queue = ArrayQueue()
    for elem in "abc":
        queue.enqueue(elem)
    queue.clear()
    assert len(queue) == 0
    assert queue.is_empty()
    with pytest.raises(QueueEmptyError):
        queue.front()


def test_reusable_after_emptied():
    queue = ArrayQueue()
    for _ in range(2):
        for elem in "abc":
            queue.enqueue(elem)
        assert list(queue) == ["a", "b", "c"]
        while not queue.is_empty():
            queue.dequeue()
        assert len(queue) == 0


def test_iteration_front_to_rear():
    queue = ArrayQueue()
    for elem in [3, 1, 2]:
        queue.enqueue(elem)
    queue.dequeue()
    assert list(queue) == [1, 2]


def test_render_empty():
    assert ArrayQueue().render() == "(Queue Empty) \n"


def test_render_contents():
    queue = ArrayQueue()
    for elem in "ab":
        queue.enqueue(elem)
    text = queue.render()
    assert text.startswith("Queue contents (front to end): \n")
    assert text.endswith("\n------------------------------ \n")
    assert "a b " in text


def test_many_elements_keep_order():
    queue = ArrayQueue()
    for value in range(1000):
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(1000)] == list(range(1000))