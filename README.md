# triage_desk

A small console desk for a waiting room. Patients are registered with an ID
and a description of their problem. Each one starts at priority `Bajo`. They
are served highest priority first (`Alto`, then `Medio`, then `Bajo`), and
within the same priority the one with the earliest registration time goes
first.

## Installing

```
pip install .
```

## Running

```
triage-desk
```

The program shows a menu (in Spanish) and reads choices from standard input.
The screen is cleared before each menu only when output goes to a terminal.

1. Register a patient: an integer ID and a problem description (kept to its
   first 255 characters). A non-numeric ID is rejected.
2. Assign a priority to a patient: `Bajo`, `Medio` or `Alto`, spelled exactly
   so. Changing the priority resets the patient's registration time. Any other
   word leaves the priority as it was.
3. Show the waiting list in service order, numbered from 1.
4. Serve the next patient, who is removed from the queue.
5. Look up a patient by ID and show the problem, priority and registration
   time.
6. Quit.

After each action the program waits for a line of input (press Enter) before
showing the menu again. It also stops when its input runs out.

## Using the library

```python
from triage_desk.triage import TicketQueue, Priority

queue = TicketQueue(clock=lambda: 0)
queue.register(1, "headache")
queue.register(2, "broken arm")
queue.assign_priority(2, Priority.parse("Alto"))

for ticket in queue.waiting():
    print(ticket)

served = queue.pop_next()   # the "broken arm" ticket
```

- `TicketQueue(clock=None)` takes an optional clock returning seconds; it
  defaults to `time.time`. Timestamps are stored as whole seconds.
- `TicketQueue.assign_priority` accepts a `Priority` or one of the names
  `"Bajo"`, `"Medio"`, `"Alto"`.
- `TicketQueue.find` raises `TicketNotFoundError` for an unknown ID.
- `TicketQueue.pop_next` raises `IndexError` when the queue is empty.
- `Priority.parse` raises `InvalidPriorityError` for any text other than the
  three priority names.
- `triage_desk.triage.lower_than(a, b)` is true when ticket `a` is served
  before ticket `b`.
- `triage_desk.cli.format_ticket` renders a ticket's details, and
  `triage_desk.cli.run(queue, stdin, stdout)` drives the menu over any pair of
  text streams.

`triage_desk.linked_list.LinkedList` is the singly linked list the queue is
built on. It supports `len()` and iteration, pushes and pops at either end,
a cursor (`first`, `next`, `push_current`, `pop_current`) and an ordered
insert, `sorted_insert(data, lower_than)`. Pops on an empty list, and cursor
operations with no current element, raise `IndexError`.

`triage_desk.extra` provides `read_csv_line(stream, separator)`, which reads
one line and splits it into fields that may be wrapped in double quotes
(returning `None` at end of input), `split_string(text, delim)`, which splits
on any character of `delim` and trims spaces from each token, and the console
helpers `clear_screen` and `wait_for_key`.

## What it does not do

Tickets live in memory only: nothing is saved, and the queue is empty every
time `triage-desk` starts. The menu offers no way to load patients from a
file.

## Tests

```
pip install .[test]
pytest
```