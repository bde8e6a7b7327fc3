"""Linear congruential random number generator used throughout the benchmark."""

_MODULUS = 1 << 63
_MASK64 = (1 << 64) - 1
_MULTIPLIER = 2806196910506780709
_INCREMENT = 1


class LCG:
    """A 63-bit linear congruential generator with a mutable seed."""

    __slots__ = ("seed",)

    def __init__(self, seed):
        self.seed = int(seed) & _MASK64

    def random_int(self):
        """Advance the generator and return the new seed."""
        self.seed = (_MULTIPLIER * self.seed + _INCREMENT) % _MODULUS
        return self.seed

    def random_double(self):
        """Advance the generator and return a float in [0, 1)."""
        return float(self.random_int()) / float(_MODULUS)

    def __repr__(self):
        return f"LCG(seed={self.seed})"


def fast_forward_lcg(seed, n):
    """Return the seed reached after ``n`` steps from ``seed`` in O(log n)."""
    n %= _MODULUS
    a, c = _MULTIPLIER, _INCREMENT
    a_new, c_new = 1, 0
    while n > 0:
        if n & 1:
            a_new = a_new * a & _MASK64
            c_new = (c_new * a + c) & _MASK64
        c = c * (a + 1) & _MASK64
        a = a * a & _MASK64
        n >>= 1
    return ((a_new * (int(seed) & _MASK64) + c_new) & _MASK64) % _MODULUS