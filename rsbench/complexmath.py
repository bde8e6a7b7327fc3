"""Complex helpers and the fast Faddeeva approximation used by the kernel.

Arithmetic is spelled out component-wise so results are reproducible
independently of the platform's complex division algorithm.
"""

import math


def c_mul(a, b):
    """Multiply two complex numbers component-wise."""
    ar, ai = a.real, a.imag
    br, bi = b.real, b.imag
    return complex(ar * br - ai * bi, ar * bi + ai * br)


def c_div(a, b):
    """Divide two complex numbers; raises ZeroDivisionError when ``b`` is zero."""
    ar, ai = a.real, a.imag
    br, bi = b.real, b.imag
    denom = br * br + bi * bi
    return complex((ar * br + ai * bi) / denom, (ai * br - ar * bi) / denom)


def _c_abs(z):
    return math.sqrt(z.real * z.real + z.imag * z.imag)


def fast_exp(x):
    """Approximate exp(x) as (1 + x/4096) ** 4096 by repeated squaring."""
    x = 1.0 + x * 0.000244140625
    for _ in range(12):
        x *= x
    return x


def fast_cexp(z):
    """Approximate the complex exponential using :func:`fast_exp`."""
    magnitude = fast_exp(z.real)
    return c_mul(complex(magnitude, 0.0), complex(math.cos(z.imag), math.sin(z.imag)))


# Abrarov approximation, N = 10, Tm = 12.0
_PREFACTOR = complex(0.0, 8.124330e01)
_AN = (
    2.758402e-01,
    2.245740e-01,
    1.594149e-01,
    9.866577e-02,
    5.324414e-02,
    2.505215e-02,
    1.027747e-02,
    3.676164e-03,
    1.146494e-03,
    3.117570e-04,
)
_NEG_1N = (-1.0, 1.0, -1.0, 1.0, -1.0, 1.0, -1.0, 1.0, -1.0, 1.0)
_DENOMINATOR_LEFT = (
    9.869604e00,
    3.947842e01,
    8.882644e01,
    1.579137e02,
    2.467401e02,
    3.553058e02,
    4.836106e02,
    6.316547e02,
    7.994380e02,
    9.869604e02,
)

# Three-term asymptotic expansion parameters
_QA = complex(0.512424224754768462984202823134979415014943561548661637413182, 0.0)
_QB = complex(0.275255128608410950901357962647054304017026259671664935783653, 0.0)
_QC = complex(0.051765358792987823963876628425793170829107067780337219430904, 0.0)
_QD = complex(2.724744871391589049098642037352945695982973740328335064216346, 0.0)

_I = complex(0.0, 1.0)
_ONE = complex(1.0, 0.0)


def fast_nuclear_w(z):
    """Approximate the Faddeeva function w(z).

    Uses the Abrarov approximation for |z| < 6 and a three-term
    asymptotic expansion elsewhere.
    """
    z = complex(z)
    if _c_abs(z) < 6.0:
        t1 = complex(0.0, 12.0)
        t2 = complex(12.0, 0.0)
        exp_term = fast_cexp(c_mul(t1, z))
        w = c_div(c_mul(_I, _ONE - exp_term), c_mul(t2, z))
        z_squared = c_mul(z, z)
        total = complex(0.0, 0.0)
        for an, sign, left in zip(_AN, _NEG_1N, _DENOMINATOR_LEFT):
            top = c_mul(complex(sign, 0.0), fast_cexp(c_mul(t1, z))) - _ONE
            bot = complex(left, 0.0) - c_mul(complex(144.0, 0.0), z_squared)
            total = total + c_mul(complex(an, 0.0), c_div(top, bot))
        return w + c_mul(_PREFACTOR, c_mul(z, total))

    z2 = c_mul(z, z)
    bracket = c_div(_QA, z2 - _QB) + c_div(_QC, z2 - _QD)
    return c_mul(c_mul(z, _I), bracket)