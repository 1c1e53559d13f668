# dailysolve

This package solves a set of short practice problems. Each one is a plain
Python function. A command reads a problem's input in the usual judge format
and prints the answers.

It has no dependencies beyond Python 3.10 or later.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the functions

The solutions are grouped by the kind of work they do:

- `dailysolve.scores` has the pass/fail and winner decisions:
  - `cwc_qualifies`
  - `exam_winner`
  - `election_winner`
  - `chef_score_possible`
  - `chef_games_verdict`
  - `nibble_verdict`
  - `blackjack_third_card`, which returns `None` when no card works
  - `qualify_verdict`
  - `pass_or_fail`
- `dailysolve.counting` has the counting and arithmetic problems:
  - `min_masks`
  - `can_split_odd_product`
  - `min_removals_to_equal`
  - `can_pair_animals`
  - `count_recent_contests`
  - `count_tuesdays`
  - `max_baths`
  - `sale_price`
  - `presents_paid`
  - `min_packets`
- `dailysolve.sequences` has the problems that walk over a list:
  - `max_occupancy`
  - `atm_outcomes`
  - `is_pseudo_sorted`
  - `polynomial_degree`, which returns `None` when every coefficient is zero
  - `coin_position`
  - `max_distance`
  - `min_inferno_time`
  - `can_candidate_win`
  - `max_people_in_office`
- `dailysolve.misc` has the rest:
  - `max_tastiness`
  - `encode_message`, which raises `ValueError` for anything other than lowercase letters
  - `faster_transport`
  - `battle_time`
  - `min_attacks`
  - `max_rental_months`
  - `nationality`

```python
from dailysolve.counting import min_removals_to_equal
from dailysolve.sequences import atm_outcomes

min_removals_to_equal([1, 2, 2, 3])   # 2
atm_outcomes(10, [3, 5, 3])            # "110"
```

## Solving whole inputs

`dailysolve.problems` knows every problem by its code, for example
`MASKPOL`, `ATM2` or `CWC23QUALIF`.

- `problem_codes()` returns all the codes, sorted.
- `PROBLEMS` is a read-only mapping from each code to a `Problem`. A
  `Problem` holds its `code`, a one-line `summary` and the `handler` that
  answers it.
- `run(code, text)` takes the whole input text of a problem and returns the
  output, one answer per line.

Most problems expect the number of test cases first and then the cases.
`CWC23QUALIF` takes a single score. For `DPOLY`, an all-zero polynomial
produces no output line.

`run` raises `ValueError` in these cases:

- the code is unknown
- the input ends early
- a token that should be an integer is not one

The same is available from the shell. Give the problem code and feed the
input on standard input:

```
dailysolve MASKPOL < input.txt
```

An unknown code is rejected with a usage message. If the input cannot be
read, the command writes the error to standard error and exits with status 1.