# rowart

Build text patterns row by row: star triangles, pyramids, diamonds, hollow
rectangles, crosses and "tables", along with number and letter variants.

Every pattern function takes its size and returns a list of strings, one per
row. Each cell in a row takes two characters: a symbol followed by a space, or
two spaces for a blank cell, so every row ends with a space. Left padding is
written as blank cells of the same width. A size of zero or less gives an
empty list.

## Installation

```
pip install .
```

## Library use

```python
from rowart.shapes import pyramid, diamond, hollow_rectangle
from rowart.numbers import number_pyramid, min_grid
from rowart.letters import letter_pyramid, palindrome_letter_pyramid

print("\n".join(pyramid(3)))
#     *
#   * * *
# * * * * *

print("\n".join(palindrome_letter_pyramid(3)))
#     A
#   A B A
# A B C B A

print("\n".join(min_grid(3)))
# 1 1 1
# 1 2 2
# 1 2 3
```

In the letter patterns, position 1 is `A`, 2 is `B` and so on; positions past
26 run on into the characters that follow `Z`.

Modules:

- `rowart.shapes`: `diamond`, `hollow_rectangle(length, breadth)`,
  `inverted_right_triangle`, `pyramid`, `right_triangle`,
  `rhombus(length, breadth)`, `cross`, `plus_sign`, `table`.
- `rowart.numbers`: `alternating_binary_triangle`, `parity_binary_triangle`,
  `consecutive_triangle`, `consecutive_odd_triangle`, `counting_triangle`,
  `inverted_counting_triangle`, `odd_triangle`, `number_pyramid`,
  `palindrome_number_pyramid`, `number_table`, `reflected_number_table`,
  `min_grid`.
- `rowart.letters`: `letter_triangle`, `letter_square`, `letter_pyramid`,
  `mixed_triangle`, `right_letter_triangle`, `letter_table`,
  `inverted_letter_triangle`, `inverted_mixed_triangle`,
  `palindrome_letter_pyramid`.

All functions except `hollow_rectangle` and `rhombus` take a single size `n`.

## Command line

The `rowart` command prints one pattern, named after its function with
hyphens in place of underscores (`number-pyramid`, `hollow-rectangle`, ...).

```
rowart --list                   # list the pattern names
rowart pyramid 4                # print a pyramid of height 4
rowart hollow-rectangle 3 5     # length and breadth for two-sided shapes
```

Given a pattern name without sizes, the command runs interactively: it asks
for the size (or the length and then the breadth), prints the pattern, and
asks `do you want to continue(y/n): `. It goes round again while the answer
starts with `y` or `Y`, and on anything else, or at the end of input, it
prints a blank line and `exit.........`.

```
rowart diamond
```

A size that is not a whole number ends the interactive run with exit status 2.
Giving the wrong number of sizes, or no pattern name, is reported as a usage
error. Run `rowart --help` for the full usage.

## Running the tests

```
pip install .[test]
pytest
```