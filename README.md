# adtkit

This package provides small, readable implementations of two classic abstract
data types. It also has a few helpers that read validated values from
line-oriented text input.

- `adtkit.stack`: the abstract LIFO `Stack` class and two implementations of
  it. `ArrayStack` keeps its elements in a Python list. `LinkedStack` keeps
  them in a doubly linked list with header and trailer sentinels.
- `adtkit.queues`: a FIFO `ArrayQueue`.
- `adtkit.textinput`: readers for integers, doubles, single characters and
  strings from a stream. They apply strict format checks. The module also
  splits a string into a fixed number of tokens.
- `adtkit.demo`: a demonstration that exercises the containers and times a
  stress run.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Stacks

```python
from adtkit.stack import ArrayStack, LinkedStack, StackEmptyError

stack = LinkedStack()
for ch in "abc":
    stack.push(ch)

stack.peek()      # 'c'
len(stack)        # 3
list(stack)       # ['c', 'b', 'a'], top to bottom
stack.pop()       # 'c'
stack.clear()
stack.is_empty()  # True

try:
    stack.pop()
except StackEmptyError:
    ...
```

`pop()` and `peek()` raise `StackEmptyError` when the stack is empty.
`StackEmptyError` is a subclass of `IndexError`. `render()` returns a printable
listing of the contents, from top to bottom, with a `--- bottom ---` line at
the end. For an empty stack it returns `(Stack Empty)` instead.

## Queues

```python
from adtkit.queues import ArrayQueue, QueueEmptyError

queue = ArrayQueue()
queue.enqueue("a")
queue.enqueue("b")
queue.front()     # 'a'
queue.dequeue()   # 'a'
list(queue)       # ['b'], front to end
print(queue.render())
```

`dequeue()` and `front()` raise `QueueEmptyError` when the queue is empty.
`QueueEmptyError` is a subclass of `IndexError`. `clear()` removes every
element, and `is_empty()` reports whether none are left.

## Reading input

```python
import io
from adtkit.textinput import read_integer, read_double, split_string, InputFormatError

read_integer(io.StringIO("-42\n"))   # -42
read_double(io.StringIO("3.5\n"))    # 3.5
split_string("a;b;c", 3, ";")        # ['a', 'b', 'c']
split_string("a;b", 3, ";")          # ['a', 'b', None]
```

Each reader works on a single line and reads at most 19 characters of it. A
trailing newline is dropped before the text is checked.

- `read_integer` accepts an optional leading `-` followed only by digits. An
  empty line or a lone `-` reads as `0`.
- `read_double` accepts an optional leading `-`, digits and at most one `.`. A
  line made only of a sign and a dot reads as `0.0`.
- `read_char` returns the first character of the line.
- `read_string(max_chars)` returns up to `max_chars - 1` characters of the
  line.

Malformed input raises `InputFormatError`, which is a subclass of
`ValueError`. Examples are `"12a"`, `"1.2.3"`, a value with spaces around it,
or an empty line given to `read_char`. At end of input the readers raise
`EOFError`. If no stream is given, they read standard input.
`is_integer_format` and `is_double_format` expose the same format checks as
predicates.

`split_string` splits on the first character of the delimiter. A delimiter at
the very end of the string does not start a new token. Missing tokens are
filled with `None`. It raises `ValueError` in three cases: the string holds
more tokens than requested, the delimiter is empty, or fewer than one token is
requested.

## Demonstration

```
adtkit-demo
adtkit-demo stack-array
adtkit-demo queue --size 5000
```

The command takes one optional positional argument, the container to use. The
choices are `stack` (a `LinkedStack`, the default), `stack-array` (an
`ArrayStack`) and `queue` (an `ArrayQueue`).

The demo runs the same sequence twice. It pushes or enqueues the characters
`a` to `f` and prints each step, then removes them all. It then runs a stress
test: it adds `--size` elements (100000 by default), removes them again, and
prints the CPU time taken. A negative size is rejected with exit status 1.

The same steps are available as functions: `run_lifo`, `run_fifo`,
`stress_stack` and `stress_queue`. Each takes an optional output stream.

## Limitations

Queues come in one implementation only, `ArrayQueue`; there is no linked-list
queue. The demonstration is not interactive and does not read any input.