# pushswap

A push-swap solver: it takes a list of integers and prints the stack
operations (`sa`, `pb`, `ra`, `pa`, ...) that sort them using two stacks.
The package also holds the small helper library the solver is built on:
integer helpers, string utilities, integer and float formatting, a
printf-style formatter and a simple directory lister.

## Installing

```
pip install .
```

## Command line

```
pushswap 3 1 2
```

The arguments are the numbers to sort, with the top of stack `a` first.
The command prints the operations on one line, separated by spaces, and
exits with status 0.

- It needs at least two numbers. With fewer, or when an argument that does
  not start with `0` reads as zero (for example `abc`), it prints an empty
  line and exits with status 84.
- A list that is already in order prints an empty line.
- Otherwise the line holds every operation applied, followed by a closing
  `rb`.
- On inputs where the sorter would make no progress, it writes a message to
  standard error and exits with status 84.

## Library use

```python
from pushswap.stacks import Stacks
from pushswap.solver import solve, is_unsorted

stacks = Stacks([3, 1, 2])
stacks.sa()
stacks.pb()
print(stacks.dump())      # stack a on one line, stack b on the next

print(is_unsorted([3, 1, 2]))
print(solve([3, 1, 2]))   # list of operation words
```

`Stacks` keeps two lists, `a` and `b`, with index 0 as the top. It has the
operations `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb`,
`rrr`, plus `extremes()` (smallest and biggest value of `a`) and `dump()`.
Note that `sb` only swaps when the top of `b` is the larger value.

`pushswap.solver` also provides `needs_sa`, `sa_case`, `needs_ra`,
`needs_rra`, `push_value`, `push_index`, `bring_and_push`,
`check_arguments` and `main(argv=None)`.

Other modules:

- `pushswap.arith`: `get_number`, `compute_power`, `compute_square_root`,
  `is_prime`, `find_prime_sup`, `sign_letter`, `sort_ints`, `swap`.
  Results that do not fit a signed 32-bit integer come back as 0.
- `pushswap.strutils`: `reverse`, `words`, `count_words`, `is_alphanum`,
  `is_alpha`, `is_lower`, `is_upper`, `is_num`, `is_printable`,
  `capitalize`, `upcase`, `lowcase`, `concat`, `concat_n`, `copy_n`,
  `compare`, `compare_n`, `find`, `sort_chars`, `show_word_array`.
- `pushswap.numfmt`: `pad`, `format_int`, `format_unsigned`,
  `format_plain_int`, `format_hex`, `format_octal`, `format_octal_char`,
  `format_printables`, `format_float`, `format_float_trimmed`,
  `format_exp`. Each returns text; floats are handled at single precision.
- `pushswap.printf`: `sprintf(fmt, *args)` returns the formatted text and
  `printf(fmt, *args)` writes it to standard output and returns its length.
  Conversions: `d i u e E g G c s p n x X S % f F o`. Flag helpers
  `parse_flags`, `field_width`, `precision`, `zero_padding`, `alignment`,
  `alternate_prefix`, `space_prefix` and `format_general` are public too.
- `pushswap.listing`: `list_default`, `list_all`, `list_reverse`,
  `list_long`, `list_recursive`, `list_named`, `list_by_time` return the
  listing of a directory as text; helpers include `visible_entries`,
  `count_entries`, `block_count`, `sort_names`, `permissions`,
  `format_date`, `month_number`, `month_abbrev`, `name_arguments`,
  `count_names` and `heading`. Month abbreviations are in Spanish.

## What it does not do

The directory lister is a library only: there is no `ls`-style command and
no option parsing that chooses between the listing functions. The only
command is `pushswap`.

## Tests

```
pip install .[test]
pytest
```