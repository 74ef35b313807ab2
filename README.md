# specfun

Special functions and small numerical tools for Python, working on plain
floats and lists.

## What is in it

- `specfun.logarithms`: `log`, `log10` and `log2` by rational approximation
- `specfun.bessel_k`: modified Bessel functions of the third kind `k0`, `k1`
  and their exponentially scaled forms `k0e`, `k1e`
- `specfun.bessel_kn`: `kn(n, x)` for integer order `n` up to 31
- `specfun.normal`: the normal distribution function `ndtr`, its inverse
  `ndtri`, and the error functions `erf` and `erfc`
- `specfun.kolmogorov`: the one-sided Smirnov probability `smirnov(n, e)`,
  Kolmogorov's limiting distribution `kolmogorov(y)`, and their inverses
  `smirnovi(n, p)` and `kolmogi(p)`
- `specfun.levinson`: `levinson(r, n)` solves the linear prediction equations
  from an autocorrelation sequence and returns a `LevinsonResult` with the
  predictor coefficients `a`, the prediction errors `e` and the reflection
  coefficients `refl`
- `specfun.lrand`: `WichmannHill`, an infinite iterator over a
  three-generator congruential sequence, and `lrand()`, which draws from a
  shared default generator
- `specfun.matrix`: `transpose` of a square matrix given as rows
- `specfun.polevl`: Horner evaluation with `polevl(x, coef)` and, for monic
  polynomials whose leading 1.0 is left out, `p1evl(x, coef)`;
  coefficients run from the highest power down
- `specfun.errors`: the exceptions raised by the functions above

## Installation

```
pip install .
```

With the test runner:

```
pip install ".[test]"
```

## Usage

```python
from specfun.logarithms import log2
from specfun.normal import ndtr, ndtri
from specfun.bessel_k import k0
from specfun.kolmogorov import kolmogorov, kolmogi
from specfun.levinson import levinson
from specfun.lrand import WichmannHill

log2(1024.0)                 # 10.0
ndtri(ndtr(1.25))            # about 1.25
k0(1.0)
kolmogi(kolmogorov(1.0))     # about 1.0

result = levinson([1.0, 0.5, 0.25])
result.a, result.e, result.refl

gen = WichmannHill(1, 10000, 3000)
first_three = [next(gen) for _ in range(3)]
```

`levinson` stops the recursion once the prediction error drops below 0.01
and leaves the remaining entries at zero. `WichmannHill` seeds must each lie
between 1 and one less than their generator's modulus (30269, 30307, 30323);
its values are the product of the three states reduced to a signed 32-bit
integer.

## Errors

Arguments outside a function's domain raise an exception instead of giving
back a sentinel value. Every such exception derives from
`specfun.errors.MathError` and records the function name in `function` and
an `ErrorCode` in `code`:

- `DomainError` (also a `ValueError`), for example `k0(-1.0)`, `log(-2.0)`,
  `ndtri(0.0)` or `smirnov(0, 0.5)`
- `SingularityError` (also a `ZeroDivisionError`), for example `log(0.0)` or
  `kn(1, 0.0)`
- `OverflowRangeError` (also an `OverflowError`), for example `kn(40, 1.0)`
- `UnderflowRangeError`, for example `kn(0, 800.0)`
- `PrecisionLossError`

```python
from specfun.errors import DomainError
from specfun.bessel_k import k0

try:
    k0(-1.0)
except DomainError as exc:
    print(exc.function, exc.code)
```

`erfc` does not raise on underflow: it returns 0.0 for large positive
arguments and 2.0 for large negative ones.

## What it does not do

The package has no Bessel functions of the first or second kind (`J` and
`Y`), no polynomial arithmetic or polynomial root finding, and no integer
square root. It is a library only and installs no command.

## Running the tests

```
pytest
```