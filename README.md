# dsdrills

A small collection of classic data-structure exercises, written as plain
Python, together with a contact book and a terminal snake game built on them.

## Modules

- `dsdrills.seqlist.SeqList` — a sequence list with `push_front`,
  `push_back`, `pop_front`, `pop_back`, positional `insert` and `erase`,
  `find` (index of the first equal element, or `-1`), `clear` and `render`.
  It supports `len()`, iteration and indexing. With `max_size` set it refuses
  to grow past that size and raises `OverflowError`; with `max_size=None` it
  grows as needed. `render` prints integers that are letter codes as letters.
- `dsdrills.slist.SinglyLinkedList` — a singly linked list of `Node` objects.
  `find` returns a node, which can then be passed to `insert_before`,
  `insert_after`, `erase` and `erase_after`. `nodes()` yields the nodes from
  head to tail and `render()` gives `1->2->NULL`.
- `dsdrills.dlist.DoublyLinkedList` — a circular doubly linked list with a
  sentinel, with `is_empty`, push and pop at both ends, `find`,
  `insert_after`, `erase`, `clear` and `render` (`1->2->`).
- `dsdrills.contacts` — `Contact` records (name, gender, age, tel, addr) and
  a `ContactBook` kept in insertion order and unique by name. The book has
  `index_of`, `get`, `add`, `remove`, `update`, `save`, `load` and `clear`.
  `save` writes each contact as a fixed-size binary record
  (`Contact.pack` / `Contact.unpack`, `RECORD_SIZE` bytes each); `load`
  appends the records of a file and returns how many it read.
- `dsdrills.snake.SnakeGame` — the rules of a snake game on a walled board:
  `turn`, `step`, `speed_up`, `slow_down`, `quit`, `spawn_food`,
  `wall_cells` and `end_message`, with `Direction` and `State` enums.
- `dsdrills.snake_ui` — a curses front end: `render_board`, `help_lines`,
  `play` and `main`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library use

```python
from dsdrills.seqlist import SeqList
from dsdrills.dlist import DoublyLinkedList
from dsdrills.contacts import Contact, ContactBook

items = SeqList(max_size=None)
items.push_front(2)
items.push_front(1)
items.push_back(3)
print(items.render())        # "1 2 3 "
print(items.find(3))         # 2

chain = DoublyLinkedList([1, 2, 3, 4])
chain.insert_after(chain.find(1), 5)
print(chain.render())        # "1->5->2->3->4->"

book = ContactBook()
book.add(Contact("Alice", "F", 30, "5550100", "Somewhere"))
book.update("Alice", "age", 31)
book.save("contacts.bin")
```

Errors are raised rather than reported: popping from an empty list or using a
position out of range raises `IndexError`; a full bounded list raises
`OverflowError`; a node that is not in the list raises `ValueError`; a
missing contact name raises `KeyError`; adding a second contact with the same
name raises `DuplicateContactError`, a `ValueError`.

## Commands

The contact book has an interactive, menu-driven shell that reads its answers
from standard input:

```
dsdrills-contacts [--file PATH] [--max-entries N]
```

It offers loading saved contacts, adding, deleting, listing, finding and
modifying entries. Contacts are loaded from and saved to `--file`
(`contact.txt` by default); `--max-entries` caps the size of the book. On
exit it asks whether to save.

The snake game runs in the terminal:

```
dsdrills-snake [--seed N]
```

Arrow keys steer, F3 speeds up (and raises the score per food), F4 slows
down, Space pauses until Space is pressed again, and Esc ends the game. After
a game it asks whether to play another round. `--seed` makes food placement
repeatable.

## Limitations

The snake game needs Python's `curses` module, which is not available on
every platform; the game rules in `dsdrills.snake` work without it. The
contact shell keeps no data between runs other than what it saves to its
record file.