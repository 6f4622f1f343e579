import io

import pytest

from adtkit.demo import main, run_fifo, run_lifo, stress_queue, stress_stack
from adtkit.queues import ArrayQueue
from adtkit.stack import ArrayStack, LinkedStack


@pytest.mark.parametrize("stack_type", [ArrayStack, LinkedStack])
def test_run_lifo_reports_pushes_and_pops(stack_type):
    stack = stack_type()
    out = io.StringIO()
    run_lifo(stack, out)
    text = out.getvalue()
    assert "Pushing a ...-> a at top of stack (size = 1).\n" in text
    assert "Pushing f ...-> f at top of stack (size = 6).\n" in text
    assert "Popped f from stack -> (resulting size = 5).\n" in text
    assert "Popped a from stack -> (resulting size = 0).\n" in text
    assert stack.is_empty()


@pytest.mark.parametrize("stack_type", [ArrayStack, LinkedStack])
def test_run_lifo_pops_in_reverse_order(stack_type):
    out = io.StringIO()
    run_lifo(stack_type(), out)
    popped = [
        line.split()[1]
        for line in out.getvalue().splitlines()
        if line.startswith("Popped")
    ]
    assert popped == list(reversed("abcdef"))


def test_run_lifo_twice_gives_same_output():
    stack = LinkedStack()
    first, second = io.StringIO(), io.StringIO()
    run_lifo(stack, first)
    run_lifo(stack, second)
    assert first.getvalue() == second.getvalue()


def test_run_fifo_reports_and_empties():
    queue = ArrayQueue()
    out = io.StringIO()
    run_fifo(queue, out)
    text = out.getvalue()
    assert text.startswith("(Queue Empty) \n")
    assert "Pushing c ...-> a at front of queue (size = 3).\n" in text
    assert "Dequeued a from queue -> (resulting size = 5).\n" in text
    assert queue.is_empty()


def test_run_fifo_dequeues_in_order():
    out = io.StringIO()
    run_fifo(ArrayQueue(), out)
    dequeued = [
        line.split()[1]
        for line in out.getvalue().splitlines()
        if line.startswith("Dequeued")
    ]
    assert dequeued == list("abcdef")


@pytest.mark.parametrize("stack_type", [ArrayStack, LinkedStack])
def test_stress_stack_leaves_empty(stack_type):
    stack = stack_type()
    out = io.StringIO()
    elapsed = stress_stack(stack, 500, out)
    assert stack.is_empty()
    assert elapsed >= 0
    assert "Stress testing with 500 elements... \n" in out.getvalue()
    assert "-- Time taken: " in out.getvalue()


def test_stress_queue_leaves_empty():
    queue = ArrayQueue()
    out = io.StringIO()
    elapsed = stress_queue(queue, 500, out)
    assert queue.is_empty()
    assert elapsed >= 0
    assert out.getvalue().startswith("\nStress testing with 500 elements... \n")


@pytest.mark.parametrize("kind", ["stack", "stack-array", "queue"])
def test_main_runs_each_kind(kind, capsys):
    assert main([kind, "--size", "100"]) == 0
    captured = capsys.readouterr().out
    assert "Stress testing with 100 elements..." in captured


def test_main_queue_output(capsys):
    assert main(["queue", "--size", "10"]) == 0
    captured = capsys.readouterr().out
    assert captured.count("Dequeued f from queue -> (resulting size = 0).") == 2


def test_main_rejects_negative_size():
    assert main(["stack", "--size", "-1"]) == 1


def test_main_rejects_unknown_kind():
    with pytest.raises(SystemExit):
        main(["heap"])