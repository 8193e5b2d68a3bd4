# homopaillier/config.py
import os

# Miller-Rabin trials per candidate, false positive rate <= 4^-20
MILLER_RABIN_ROUNDS = 20

MIN_PRIME_BITS = 2
# 2-bit halves can only give n = 2 * 3, where gcd(n, (p-1)(q-1)) = 2 and mu does not exist
MIN_KEY_BITS = 6


def _key_bits_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        bits = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if bits < MIN_KEY_BITS:
        raise ValueError(f"{name} must be >= {MIN_KEY_BITS}, got {bits}")
    return bits


# Key size used when generate_keypair() is called without an explicit size
DEFAULT_KEY_BITS = _key_bits_from_env("HOMOPAILLIER_KEY_BITS", 1024)
