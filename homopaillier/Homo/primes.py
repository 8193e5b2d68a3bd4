# homopaillier/Homo/primes.py
import logging
import random

from homopaillier.config import MILLER_RABIN_ROUNDS, MIN_PRIME_BITS
from homopaillier.Homo.errors import InvalidInput
from homopaillier.Homo.utils import default_rng

logger = logging.getLogger(__name__)


def is_probable_prime(n: int, rounds: int = MILLER_RABIN_ROUNDS,
                      rng: random.Random | None = None) -> bool:
    """
    Miller-Rabin test with `rounds` random witnesses.

    True means "probably prime": a composite survives all rounds with
    probability at most 4^-rounds. False is always correct.
    """
    if n <= 1:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False

    # n - 1 = d * 2^s, d odd
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    rng = default_rng(rng)
    for _ in range(rounds):
        a = rng.randint(2, n - 2)
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    return True


def generate_prime(bit_length: int, rng: random.Random | None = None) -> int:
    """Draw random `bit_length`-bit integers until one passes is_probable_prime."""
    if not isinstance(bit_length, int) or bit_length < MIN_PRIME_BITS:
        raise InvalidInput(f"prime bit length must be an int >= {MIN_PRIME_BITS}, got {bit_length!r}")
    rng = default_rng(rng)
    draws = 0
    while True:
        draws += 1
        candidate = rng.getrandbits(bit_length)
        # getrandbits may return fewer significant bits; redraw instead of padding
        if candidate.bit_length() != bit_length:
            continue
        if is_probable_prime(candidate, MILLER_RABIN_ROUNDS, rng):
            logger.debug("found %d-bit prime after %d draws", bit_length, draws)
            return candidate
