# drillbox

A box of small, classic programming drills you can import and use directly:
number checks, string puzzles, searching and sorting, matrix arithmetic, bit
flags and named states, a bump allocator, a thread-safe counter, bounded
queues, a linked stack, a binary search tree and a binary student record file.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library tour

### Numbers (`drillbox.numbers`)

```python
from drillbox.numbers import (
    is_armstrong, is_palindrome_number, is_perfect, is_prime, reverse_digits,
)

is_armstrong(153)          # True
is_palindrome_number(121)  # True
is_perfect(28)             # True
is_prime(7)                # True
reverse_digits(1234)       # 4321
reverse_digits(1200)       # 21  (trailing zeros vanish)
reverse_digits(-12)        # -21 (sign kept)
```

`is_prime` is False for anything up to 1. `is_perfect(0)` is True and
negative numbers are never perfect; `is_armstrong(0)` is True.

### Text (`drillbox.text`)

```python
from drillbox.text import is_anagram, count_vowels, star_triangle

is_anagram("listen", "silent")  # True
count_vowels("Hello World")     # 3  (a, e, i, o, u in any case)
star_triangle(3)                # "* \n* * \n* * * \n"
```

### Searching (`drillbox.searching`)

```python
from drillbox.searching import linear_search, binary_search, largest

largest([3, 9, 2])              # 9
linear_search([4, 8, 15], 8)    # 1    (zero-based index of the first match)
linear_search([4, 8, 15], 5)    # None
binary_search([1, 3, 5, 7], 5)  # 2    (items must be in ascending order)
```

`largest` raises `ValueError` for an empty collection.

### Sorting (`drillbox.sorting`)

```python
from drillbox.sorting import bubble_sort, merge_sort, quick_sort, quick_sort_lomuto

merge_sort([5, 2, 9, 1])        # [1, 2, 5, 9]
```

All four take any iterable and return a new ascending list, leaving the input
untouched. `quick_sort` partitions around the middle element, and
`quick_sort_lomuto` around the last one; `merge_sort` is stable.

### Matrices (`drillbox.matrix`)

```python
from drillbox.matrix import transpose, add_matrices

transpose([[1, 2, 3], [4, 5, 6]])   # [[1, 4], [2, 5], [3, 6]]
add_matrices([[1, 2]], [[10, 20]])  # [[11, 22]]
```

Ragged rows, or two matrices of different shapes, raise `ValueError`.

### Arithmetic (`drillbox.calculator`)

```python
from drillbox.calculator import calculate, add, multiply, compute

calculate("+", 2, 3)     # 5
calculate("/", 7, 2)     # 3.5
compute(5, 3, add)       # 8
compute(5, 3, multiply)  # 15
```

`calculate` accepts `+`, `-`, `*` and `/`. An unknown operator raises
`ValueError`; dividing by zero raises `ZeroDivisionError`.

### Flags and states (`drillbox.flags`)

```python
from drillbox.flags import StatusFlag, State

status = StatusFlag.POWER | StatusFlag.NETWORK
StatusFlag.POWER in status    # True
int(status ^ StatusFlag.ERROR)  # 7
State.RUNNING.description()   # "Process in progress"
int(State.RUNNING)            # 1
```

### Arena (`drillbox.arena`)

```python
from drillbox.arena import Arena, ArenaExhausted

pool = Arena(1024)
coords = pool.alloc(12)   # a writable memoryview of 12 bytes
name = pool.alloc(16)
pool.used                 # 28
pool.remaining            # 996
pool.reset()              # everything is free again
```

Asking for more than is left raises `ArenaExhausted` (a `MemoryError`);
negative sizes or capacities raise `ValueError`. Views handed out before a
reset still point into the same buffer and may be overwritten.

### Counter (`drillbox.counter`)

```python
from drillbox.counter import AtomicCounter, run_increments

counter = AtomicCounter()
counter.increment()       # 1  (returns the new value)
counter.increment(5)      # 6
counter.value()           # 6

run_increments(2, 100000) # 200000: two threads, 100000 increments each
```

### Containers

```python
from drillbox.bst import BinarySearchTree
from drillbox.queues import LinearQueue, CircularQueue, QueueOverflow, QueueUnderflow
from drillbox.stack import LinkedStack, StackUnderflow

tree = BinarySearchTree([50, 30, 70])
tree.insert(30)   # False: already present
list(tree)        # [30, 50, 70]
30 in tree        # True
len(tree)         # 3

queue = CircularQueue()
queue.enqueue(10)
queue.enqueue(20)
queue.dequeue()   # 10
list(queue)       # [20]

stack = LinkedStack()
stack.push(10)
stack.push(20)
str(stack)        # "20 -> 10 -> NULL"
stack.pop()       # 20
```

Both queues hold five values unless given another `capacity`. A full queue
raises `QueueOverflow` and an empty one `QueueUnderflow`. A `LinearQueue`
never reuses a slot: once `capacity` values have gone in it stays full, even
after it has been emptied. A `CircularQueue` reuses freed slots. Popping an
empty stack raises `StackUnderflow`.

### Student records (`drillbox.students`)

```python
from drillbox.students import Student, StudentFile

records = StudentFile("students.dat")
records.add(Student(roll=1, name="Alice", marks=91.5))
records.find(1)          # Student(roll=1, name='Alice', marks=91.5)
records.find(2)          # None
for student in records:
    print(student)
```

Each record has a fixed-size little-endian binary layout: a 32-bit roll
number, a 50-byte NUL-padded name and a 32-bit float for the marks
(`Student.pack` / `Student.unpack`, `Student.SIZE` bytes each). Names must
encode to fewer than 50 UTF-8 bytes. Marks are stored as 32-bit floats, so
they may read back slightly rounded. A missing file reads as empty.

## Commands

Four interactive programs are installed. They stop on menu choice 4 or at
end of input.

```
drillbox-calc [OPERATOR LEFT RIGHT]     # without arguments, asks for them
drillbox-bst [VALUE ...]                # menu: insert, display in order, search
drillbox-queue [--circular] [--capacity N]  # menu: enqueue, dequeue, display
drillbox-students [--file PATH]         # menu: add, list, search records
```

`drillbox-calc` prints `Result = ` with two decimals. `drillbox-students`
uses `students.txt` in the current directory unless `--file` is given; the
file holds binary records, not text.

## What it does not do

The student record file is append-only: records cannot be edited or deleted,
and the lookup finds the first record with a roll number. The tree, queues
and stack live in memory only and are lost when a command exits.