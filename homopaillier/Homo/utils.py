# homopaillier/Homo/utils.py
import random
from math import gcd

from homopaillier.Homo.errors import InvalidInput

_system_rng = random.SystemRandom()


def default_rng(rng: random.Random | None = None) -> random.Random:
    # SystemRandom reads os.urandom and keeps no state between calls
    return _system_rng if rng is None else rng


def lcm(a: int, b: int) -> int:
    return a * b // gcd(a, b)


def L(x: int, n: int) -> int:
    return (x - 1) // n


def mod_inverse(a: int, m: int) -> int:
    """
    a^{-1} mod m by the extended Euclidean algorithm.

    Raises InvalidInput when gcd(a, m) != 1, i.e. no inverse exists.
    """
    if m <= 0:
        raise InvalidInput(f"modulus must be positive, got {m}")
    old_r, r = m, a % m
    old_x, x = 0, 1
    while r != 0:
        q = old_r // r
        old_x, x = x, old_x - q * x
        old_r, r = r, old_r % r
    if old_r != 1:
        raise InvalidInput(f"{a} has no inverse modulo {m} (gcd={old_r})")
    while old_x < 0:
        old_x += m
    return old_x


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Square-and-multiply; exponent 0 gives 1 for every base, 0 included."""
    if exponent < 0:
        raise InvalidInput(f"exponent must be non-negative, got {exponent}")
    if modulus <= 0:
        raise InvalidInput(f"modulus must be positive, got {modulus}")
    result = 1
    base = base % modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result


def random_below_coprime(n: int, rng: random.Random | None = None) -> int:
    # r in [1, n) with gcd(r, n) == 1, i.e. r in Z*_n
    if n <= 1:
        raise InvalidInput(f"modulus too small: {n}")
    rng = default_rng(rng)
    while True:
        r = rng.randrange(1, n)
        if gcd(r, n) == 1:
            return r
