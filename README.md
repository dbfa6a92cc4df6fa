# cfsolutions

Solutions to a set of short competitive programming problems. The solutions
are plain functions in three modules. One command reads a problem's input
in the judge's format and prints the judge's output.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

The functions take Python values and return Python values. They do not read
standard input. Where the input breaks a problem's constraints (an empty
array, an unbalanced bracket sequence, a cycle of managers), they raise
`ValueError`.

```python
from cfsolutions.textproblems import abbreviate, is_dangerous
from cfsolutions.arithmetic import can_split_watermelon, moves_to_one
from cfsolutions.sequences import min_coins_to_take, prefix_max_sums

abbreviate("localization")      # "l10n"
is_dangerous("1000000001")      # True
can_split_watermelon(8)         # True
moves_to_one(3)                 # 2
min_coins_to_take([3, 3])       # 2
```

Modules:

- `cfsolutions.textproblems`: problems about strings. It has
  `hq9_produces_output`, `can_make_smaller_than_reverse`, `digits_to_remove`,
  `can_break_balance`, `can_form_palindrome`, `bit_plus_plus`, `abbreviate`
  and `is_dangerous`.
- `cfsolutions.arithmetic`: problems about numbers. It has `moves_to_one`,
  `is_sum_of_2020_2021`, `longest_divisor_interval`, `can_meet_requirement`,
  `odd_then_even`, `can_split_watermelon` and `count_solved_problems`.
- `cfsolutions.sequences`: problems about arrays and grids. It has
  `min_groups`, `min_coins_to_take`, `min_removals_balanced`,
  `recover_permutation`, `median_check`, `prefix_max_sums`,
  `shifted_permutation`, `count_valid_b`, `count_kept` and `max_earnings`.
  `median_check` returns a pair: the verdict and the required count
  `(n - 1) // 2`.

## Command line

`cfsolutions` takes a problem code and reads that problem's input from
standard input. The input uses the same whitespace-separated format as the
judge. The command writes the answer to standard output. Codes are not case
sensitive. These codes are accepted:

115A, 133A, 1374B, 1475B, 160A, 1850D, 1855B, 2085A, 2093B, 2094C, 2102A,
2102B, 2104B, 2106B, 2106C, 2110B, 2114B, 2114C, 231A, 282A, 318A, 34B, 4A,
71A, 96A.

```
echo 8 | cfsolutions 4A
YES
```

```
printf '4\nword\nlocalization\ninternationalization\npneumonoultramicroscopicsilicovolcanoconiosis\n' | cfsolutions 71A
word
l10n
i18n
p43s
```

The command answers YES or NO where a problem asks a yes/no question. For
each test case of 2102B it prints the verdict and then the required count
on a separate line. If the input ends early, holds a token that is not a
number where a number is expected, or breaks a problem's constraints, the
command prints an error message to standard error and exits with status 1.

You can also call the same dispatch from Python with `cfsolutions.cli.solve`.
It takes a problem code and the input text and returns the output text. It
raises `ValueError` for an unknown code or for bad input.

## What it does not do

The command only solves the problems listed above. It does not fetch
problems or submit answers, and it does not check answers against expected
output.