# drillbook

A small collection of classic beginner drills: a handful of number
exercises and a catalogue of text patterns built from stars, digits and
letters: squares, triangles, pyramids, diamonds and hourglasses.

It has no dependencies beyond Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Number drills

`drillbook.arithmetic` holds the number exercises:

| Function | What it does |
| --- | --- |
| `factorial(n)` | the product `1 * 2 * ... * n`; `1` when `n` is below 1 |
| `fibonacci(n)` | the n-th Fibonacci number, counting `0` as the first; raises `ValueError` when `n` is below 1 |
| `power(base, exponent)` | `base` multiplied by itself `exponent` times; an exponent of 1 or less gives `base` back |
| `is_prime(number)` | whether `number` is prime; anything below 2 is not |
| `alphabet()` | the string of lowercase letters `a` to `z` |
| `countdown(n)` | a list of the natural numbers from `n` down to `1` |
| `sum_naturals(n)` | the sum `1 + 2 + ... + n`; `0` when `n` is below 1 |

```python
from drillbook.arithmetic import factorial, fibonacci, is_prime, countdown

factorial(5)    # 120
fibonacci(1)    # 0
fibonacci(7)    # 8
is_prime(7)     # True
is_prime(1)     # False
countdown(3)    # [3, 2, 1]
```

## Patterns

Every pattern function takes a single size and returns the pattern as a
list of lines, ready to be printed one after another. Each item on a line
is followed by a single space, so most lines end in a space. A size below
1 gives an empty list.

### Squares: `drillbook.squares`

Each takes the side length `dim`:

- `letter_square`: every line is `a b c ...`, one letter per column
- `column_number_square`: every line is `1 2 ... dim`
- `descending_number_square`: every line is `dim ... 2 1`
- `increasing_number_square`: consecutive numbers from 1, row by row
- `row_letter_square`: line 1 repeats `a`, line 2 repeats `b`, and so on
- `row_number_square`: each line repeats its row number
- `squared_column_square`: every line is `1 4 9 ...`
- `star_square`: a square of `*`

### Left-aligned triangles: `drillbook.left_triangles`

Each takes the number of `rows`:

- `countdown_triangle`: line `i` is `i ... 2 1`
- `descending_from_top_triangle`: line `i` counts `i` numbers down from `rows`
- `number_triangle`: line `i` is `1 2 ... i`
- `repeated_row_number_triangle`: line `i` holds `i`, `i` times
- `letter_row_triangle`: line `i` holds the `i`-th lowercase letter, `i` times
- `star_triangle`: line `i` holds `i` stars
- `reversed_number_triangle`: `1 ... rows` first, one number fewer each line
- `reversed_star_triangle`: `rows` stars first, one fewer each line

### Right-aligned triangles: `drillbook.right_triangles`

Each takes the number of rows `n`. Lines are padded on the left with two
spaces per missing item, except `right_star_triangle`, which pads with one
space per missing star and puts no spaces between stars.

- `right_letter_triangle`: line `i` is `A B ...` up to the `i`-th letter
- `right_number_triangle`: line `i` is `1 2 ... i`
- `right_descending_letter_triangle`: line `i` counts `i` letters down from the `n`-th uppercase letter
- `right_descending_number_triangle`: line `i` is `i ... 2 1`
- `right_row_number_triangle`: line `i` holds `i`, `i` times
- `right_star_triangle`: line `i` holds `i` stars

### Other shapes: `drillbook.shapes`

Each takes the number of rows `n`:

- `diamond`: an upward triangle and its mirror; the widest row appears twice
- `hollow_double_diamond`: two star wings growing to a full middle row and shrinking back
- `hourglass`: star wings shrinking from a full top row and growing back to a full bottom row
- `inverted_pyramid`: a centred pyramid upside down
- `palindrome_pyramid`: a centred pyramid whose line `i` is `1 ... i ... 1`
- `pyramid`: a centred pyramid of stars, two stars wider each line

For example, `print("\n".join(pyramid(5)))` shows:

```
        * 
      * * * 
    * * * * * 
  * * * * * * * 
* * * * * * * * * 
```

## Command line

The package installs a `drillbook` command. Run it with `--help` to see
the drills and patterns it offers:

```
drillbook --help
```

The number drills are the commands `factorial`, `fibonacci`, `power`,
`prime`, `alphabet`, `countdown` and `sum`. Every pattern function is a
command too, named with hyphens instead of underscores, such as
`star-square` or `hollow-double-diamond`.

Numbers can be given as arguments; when none are given, the command asks
for each one on standard input:

```
$ drillbook factorial 5
Factorial of 5 : 120
$ drillbook power 2 10
Result: 1024
$ drillbook prime
Enter the number: 7
Number is prime
$ drillbook star-square 2
* * 
* * 
```

A wrong count of numbers, input that is not an integer, or a Fibonacci
position below 1 ends the command with a usage error.