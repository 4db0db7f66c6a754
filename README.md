# dcfvalue

Estimate the intrinsic value of a company with a two-stage discounted cash
flow (DCF) model. Earnings grow at one rate for a number of growth years,
then at a terminal growth rate up to a final year, and every year's earnings
are discounted back to today. In the terminal stage, earnings are projected
from the level reached after ten years of growth at the first rate.

## Installation

```
pip install .
```

## Command line

```
dcfvalue
```

The command takes no options beyond `--help`. It asks for each input in
turn on standard input and prints the result, rounded to the nearest whole
number (halves away from zero):

```
Current earnings: 828
Growth rate of earnings in growth years (must be normalized): 0.15
Growth years: 10
Terminal growth rate of earnings more than 10 years later (must be normalized): 0.05
Discount rate (must be normalized): 0.09
Year (must be greater than growth years): 100
intrinsic value: 47109
```

Rates are given as fractions, so 15% is `0.15`. Every answer is read as a
number; the growth years and the final year are then truncated to whole
numbers. If an answer is not a number, input ends early, or the inputs fail
validation, the command writes `error: ...` to standard error and exits
with status 2.

## Library

```python
from dcfvalue.condition import Condition
from dcfvalue.valuation import intrinsic_value

condition = Condition(
    current_earnings=828,
    growth_rate=0.15,
    growth_years=10,
    terminal_growth_rate=0.05,
    discount_rate=0.09,
    years=100,
)
print(intrinsic_value(condition))  # 47109.0
```

`Condition` is a frozen dataclass taking keyword arguments only. It checks
its inputs when it is created (and again on `validate()`) and raises
`InvalidConditionError`, a `ValueError`, if any rule below is broken:

- current earnings must be greater than 0
- growth rate and terminal growth rate must be between 0 and 1
- discount rate must be greater than 0 and at most 1
- growth years must be greater than 0 and no more than years
- years must be greater than 0

The prompting is available on its own through `dcfvalue.cli`:
`read_condition(stdin, stdout)` asks for all six inputs and returns a
`Condition`, and `prompt_float(prompt_text, stdin, stdout)` asks for one
number. Both raise `InputError`, a `ValueError`, on unreadable input.

## Running the tests

```
pip install ".[test]"
pytest
```