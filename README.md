# labkit

A set of small classes that show how common data structures and utilities
work. Each one is short enough to read in one sitting. The package has no
dependencies outside the standard library.

## What is inside

- `labkit.vector.Vector` is a growable array of floats. Its capacity is always
  a power of two. It has `push_back`, `pop_back`, `insert`, `erase`, `reserve`,
  `shrink`, `reallocate`, `front`, `back`, `at`, `clear`, `isempty` and
  `capacity`. Indexing and `at` raise `IndexError` for an out-of-range index,
  and so do `front`, `back` and `pop_back` on an empty vector.
  `Vector.minpow2(x)` returns the smallest power of two that is at least `x`.
- `labkit.deque.Deque` is a doubly linked double-ended queue. It has
  `push_front`, `push_back`, `pop_front`, `pop_back`, `front`, `back`,
  `reset_front(s)` and `reset_back(s)`, which trim the deque to at most `s`
  elements, and `clear`, `copy` and `assign(other)`, which reuses the existing
  nodes. `check_invariant` raises `RuntimeError` if the links or the size are
  inconsistent. The deque prints as `[ 1, 2, 3 ]`, and an empty one prints as
  `[ ]`.
- `labkit.price.Price` is an immutable amount of money. It supports `+`, `-`,
  unary `-`, multiplication and division by a number, and comparisons. It
  prints as, for example, `1000tt`. `kzt(amount)` and `tt(amount)` both build
  a `Price`. `labkit.price.Order` holds a product, a unit price and a count
  `nr`, which defaults to 1. It has `totalprice()` and prints as
  `medowik 1590tt (3 times)`. A negative count raises `ValueError`.
- `labkit.date.Date` is a mutable date in the proleptic Gregorian calendar,
  counted from year 0. Constructing a date that does not exist raises
  `ValueError`. The class has these helpers:
  - static helpers `isleapyear`, `ispossible`, `daysinyear` and `daysinmonth`
  - `usa()`, which gives `december 16 1991` and is also what `str()` returns
  - `euro()`, which gives `16 december 1991`
  - `days1jan()` and `setdays1jan(n)`
  - all six comparisons
  - `d + n`, `d - n`, `d += n` and `d -= n` for days
  - `d1 - d2`, which gives the number of days between two dates
  - `weekday()`, which gives the lower-case day name

  Dates are not hashable.
- `labkit.phonebook` has four classes:
  - `Name` is normalised to an initial capital followed by lower case.
  - `PhoneNumber.iswellformed()` is true for a `+` followed by 10 to 20 digits.
  - `PhoneEntry` holds a first name, a second name and a number.
    `PhoneEntry.parse(line)` reads three words exactly as written.
  - `PhoneBook` has `insert` and `read(stream)`, which reads the stream in
    groups of three words and ignores a trailing group with fewer.
    `checkandnormalize(err)` normalises every name and writes a line to `err`
    for each malformed number. `sort_by_secondname()` sorts the entries.
- `labkit.filereader.FileReader` wraps a text stream and buffers it for look
  ahead. It has `has(n)`, `peek(i)`, `view(i)` and `commit(n)`. It counts
  `line` and `column` from zero.
- `labkit.tokens.InputType` is the enum of token kinds, and `str()` gives each
  kind's name.
- `labkit.lexer` has `classify(reader)` and `read(reader)`. Each returns the
  kind and length of the next token without consuming it. A `-` directly
  followed by a digit is read as part of a negative number.
- `labkit.rpn` has these parts:
  - `evaluate(reader, out)` evaluates one expression in reverse Polish
    notation, up to `;` or `=`, and writes the stack after each step.
  - `apply0`, `apply1` and `apply2` apply constants, functions and operators.
  - `format_stack(stack, limit)` formats the stack for output.
  - `RpnError` reports errors with a line and column counted from 1. Its text
    looks like `unknown identifier at position 1/5`.

  Expressions may use numbers, `e`, `pi`, `+ - * / % ^`,
  `sin cos tan exp log sqrt abs`, and `//` and `/* */` comments.
- `labkit.dollarcheck.find_dollar(stream)` returns the line number of the
  first `$` in the stream, counted from 1, or `None` if there is none.

## Example

```python
from labkit.vector import Vector
from labkit.date import Date

v = Vector([100])
v.push_back(50)
v.push_back(200)
print(v, len(v), v.capacity())   # [100, 50, 200] 3 4

d = Date(1991, 12, 16)
print(d.weekday())               # monday
print(Date(2022, 9, 17) - Date(2019, 3, 23))   # days between the two dates
```

## Commands

Installing the package provides three commands.

```
labkit-rpn [FILE]
```

This command evaluates one expression in reverse Polish notation from `FILE`,
or from standard input if no file is given. It prints the stack after each
step and then the result. For example, `echo "3 4 + 2 * =" | labkit-rpn` ends
with `result: 14`. Errors in the input are printed instead of a result.

```
labkit-phonebook [BOOK] [SORTED]
```

This command reads the phone book from `BOOK`, which defaults to
`phonebook.txt`. Each entry is a first name, a second name and a phone number.
The command prints the book, normalises the names, writes a warning to
standard error for each malformed number, and prints the book again. It then
sorts the entries by second name, prints them, and writes them to `SORTED`,
which defaults to `sorted.txt`.

```
labkit-dollarcheck [FILE]
```

This command scans `FILE`, which defaults to `myfile.in`. If the file contains
a `$`, it prints `illegal dollar sign in line N` and exits with status 1.

## Limits

- The calculator evaluates a single expression per run. It has no interactive
  session and no variables. Any identifier that is not a known function or
  constant is an error.
- The phone book works only on plain text files. It has no search and no
  storage other than the sorted output file.

## Running the tests

```
pip install -e ".[test]"
pytest
```