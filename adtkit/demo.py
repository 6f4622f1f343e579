"""Demonstration runs of the stack and queue containers."""

from __future__ import annotations

import argparse
import sys
import time
from typing import TextIO

from adtkit.queues import ArrayQueue
from adtkit.stack import ArrayStack, LinkedStack, Stack

__all__ = [
    "STRESS_TEST_SIZE",
    "run_lifo",
    "run_fifo",
    "stress_stack",
    "stress_queue",
    "main",
]

STRESS_TEST_SIZE = 100000
_EXAMPLES = "abcdef"


def _output(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def run_lifo(stack: Stack, out: TextIO | None = None) -> None:
    """Push the examples onto stack, then pop them all, reporting each step."""
    out = _output(out)
    out.write(stack.render())
    for elem in _EXAMPLES:
        out.write(f"Pushing {elem} ...")
        stack.push(elem)
        out.write(f"-> {stack.peek()} at top of stack (size = {len(stack)}).\n")
    out.write(stack.render())
    while not stack.is_empty():
        popped = stack.pop()
        out.write(f"Popped {popped} from stack -> (resulting size = {len(stack)}).\n")
    out.write(stack.render())


def run_fifo(queue: ArrayQueue, out: TextIO | None = None) -> None:
    """Enqueue the examples, then dequeue them all, reporting each step."""
    out = _output(out)
    out.write(queue.render())
    for elem in _EXAMPLES:
        out.write(f"Pushing {elem} ...")
        queue.enqueue(elem)
        out.write(f"-> {queue.front()} at front of queue (size = {len(queue)}).\n")
    out.write(queue.render())
    while not queue.is_empty():
        front = queue.dequeue()
        out.write(f"Dequeued {front} from queue -> (resulting size = {len(queue)}).\n")
    out.write(queue.render())


def _report_error(out: TextIO, error: Exception) -> None:
    out.write(f"Stopping because an error ocurred... {error!r} \n")


def stress_stack(
    stack: Stack, size: int = STRESS_TEST_SIZE, out: TextIO | None = None
) -> float:
    """Push size elements then pop them all; report and return the CPU time used."""
    out = _output(out)
    out.write(f"\nStress testing with {size} elements... \n")
    start = time.process_time()
    try:
        for _ in range(size):
            stack.push("a")
    except MemoryError as error:
        _report_error(out, error)
    while not stack.is_empty():
        stack.pop()
    elapsed = time.process_time() - start
    out.write(f"-- Time taken: {elapsed:f} seconds \n")
    return elapsed


def stress_queue(
    queue: ArrayQueue, size: int = STRESS_TEST_SIZE, out: TextIO | None = None
) -> float:
    """Enqueue size elements then dequeue them all; report and return the CPU time used."""
    out = _output(out)
    out.write(f"\nStress testing with {size} elements... \n")
    start = time.process_time()
    try:
        for _ in range(size):
            queue.enqueue("a")
    except MemoryError as error:
        _report_error(out, error)
    while not queue.is_empty():
        queue.dequeue()
    elapsed = time.process_time() - start
    out.write(f"-- Time taken: {elapsed:f} seconds \n")
    return elapsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adtkit-demo",
        description="Exercise a stack or queue and time a stress run.",
    )
    parser.add_argument(
        "kind",
        nargs="?",
        default="stack",
        choices=["stack", "stack-array", "queue"],
        help="container to exercise (default: stack, the linked stack)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=STRESS_TEST_SIZE,
        help=f"number of elements in the stress run (default: {STRESS_TEST_SIZE})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration for the chosen container and return an exit status."""
    args = _build_parser().parse_args(argv)
    if args.size < 0:
        print("size must not be negative", file=sys.stderr)
        return 1
    out = sys.stdout
    if args.kind == "queue":
        queue = ArrayQueue()
        run_fifo(queue, out)
        run_fifo(queue, out)
        stress_queue(queue, args.size, out)
    else:
        stack: Stack = ArrayStack() if args.kind == "stack-array" else LinkedStack()
        run_lifo(stack, out)
        run_lifo(stack, out)
        stress_stack(stack, args.size, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())