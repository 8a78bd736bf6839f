# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a small fixed set of operations. It prints the operations it performs,
one on each line, so that applying them to the input leaves stack `a` in
ascending order and stack `b` empty.

## Installation

```
pip install .
```

## Usage

Give the integers as arguments. You can pass them as separate arguments,
as one quoted string, or mix the two:

```
pushswap 3 2 1
pushswap "4 67 3 87 23"
pushswap 5 "1 4" 2 3
```

The first number is the top of stack `a`. When the input is already sorted,
or no arguments are given, nothing is printed and the exit status is 0.

### Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa` | take the top of `b` and put it on `a` |
| `pb` | take the top of `a` and put it on `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both: the top goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse rotate: the bottom comes to the top |

### How it sorts

- Two values: at most one `sa`.
- Three values: a fixed answer of at most two operations.
- Four or more values: the values are pushed to `b` in four chunks of
  increasing value (eight chunks above 100 values), leaving three values on
  `a`, which are sorted in place; then the biggest value of `b` is brought to
  its top the shorter way round (`rb` or `rrb`) and pushed back with `pa`,
  until `b` is empty.

### Errors

A message is written to standard error and the exit status is 1 when:

- an argument is empty or holds only whitespace,
- a token is not an integer (an optional `+` or `-` followed by digits),
- a number falls outside the 32-bit signed integer range,
- a number appears more than once.

The message is `ERROR`, except for a token longer than 11 characters, which
is reported as `Error`.

## Using it from Python

```python
from pushswap.stack import Stacks
from pushswap.sort import sort_a

moves = []
stacks = Stacks([3, 1, 2], emit=moves.append)
sort_a(stacks)
print(moves)          # the operations performed
print(list(stacks.a)) # [1, 2, 3]
```

Without `emit`, `Stacks` writes each operation name and a newline to
standard output. `Stack` and `Stacks` raise `StackError` when an operation
needs values a stack does not hold (for example `pa` with `b` empty).

`pushswap.args.parse_arguments` turns command-line strings into a list of
integers and raises `ArgumentError` for input the program rejects.
`pushswap.cli.main(argv)` runs the whole command and returns its exit status.

### Helper modules

The package also carries small helpers that follow the rules of the C
library functions of the same names:

- `pushswap.printf`: `render`, `printf` and `convert_one` for the `c`, `s`,
  `d`, `i`, `u`, `x`, `X`, `p` and `%` conversions; `FormatError` for a
  format ending in a lone `%` or missing an argument.
- `pushswap.textutils`: `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strjoin`, `strtrim`, `substr`, `strlcpy`, `strlcat`, `striteri`,
  `strmapi`, `itoa`, `tolower`, `toupper`. Lookups return an index or `None`.
- `pushswap.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove`, `memset` on byte buffers, and the character classes
  `isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`.
- `pushswap.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  writing to a text stream.
- `pushswap.lists`: `LinkedList`, an ordered collection with `add_front`,
  `add_back`, `last`, `remove_first`, `clear`, `apply` and `map`.

## What it does not do

There is no command that reads a list of operations and checks whether it
sorts a given input, and no visual display of the stacks; `pushswap` only
produces the operations.

## Running the tests

```
pip install .[test]
pytest
```