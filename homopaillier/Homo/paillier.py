# homopaillier/Homo/paillier.py
import logging
import random
from dataclasses import dataclass
from typing import Tuple

from homopaillier.config import DEFAULT_KEY_BITS, MIN_KEY_BITS
from homopaillier.Homo.errors import InvalidInput, MissingPrivateKey
from homopaillier.Homo.primes import generate_prime
from homopaillier.Homo.utils import L, default_rng, lcm, mod_inverse, mod_pow, random_below_coprime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublicKey:
    n: int
    g: int

    @property
    def n_squared(self) -> int:
        return self.n * self.n


@dataclass(frozen=True, repr=False)
class PrivateKey:
    lambda_dec: int
    mu: int
    # decryption needs n; the private key owns its own copy of the public part
    public_key: PublicKey

    def __repr__(self) -> str:
        return f"PrivateKey(public_key={self.public_key!r})"


def _check_plaintext(public_key: PublicKey, m: int):
    if not isinstance(m, int) or not 0 <= m < public_key.n:
        raise InvalidInput("plaintext must be an int in [0, n)")


def _check_ciphertext(public_key: PublicKey, c: int):
    if not isinstance(c, int) or not 0 <= c < public_key.n_squared:
        raise InvalidInput("ciphertext must be an int in [0, n^2)")


def generate_keypair(bit_length: int = DEFAULT_KEY_BITS,
                     rng: random.Random | None = None) -> Tuple[PublicKey, PrivateKey]:
    """
    Generate a Paillier key pair whose modulus n has about `bit_length` bits.

    p and q are drawn independently with bit_length // 2 bits each; an odd
    bit_length is floored. g is fixed to n + 1, so
    mu = (L(g^lambda mod n^2))^{-1} mod n always exists.
    """
    if not isinstance(bit_length, int) or bit_length < MIN_KEY_BITS:
        raise InvalidInput(f"key bit length must be an int >= {MIN_KEY_BITS}, got {bit_length!r}")
    rng = default_rng(rng)

    p = generate_prime(bit_length // 2, rng)
    q = generate_prime(bit_length // 2, rng)
    while q == p:
        q = generate_prime(bit_length // 2, rng)

    n = p * q
    n2 = n * n
    lambda_dec = lcm(p - 1, q - 1)
    g = n + 1
    mu = mod_inverse(L(pow(g, lambda_dec, n2), n), n)

    public_key = PublicKey(n=n, g=g)
    private_key = PrivateKey(lambda_dec=lambda_dec, mu=mu, public_key=PublicKey(n=n, g=g))
    logger.info("generated Paillier keypair, n is %d bits", n.bit_length())
    return public_key, private_key


def encrypt(public_key: PublicKey, m: int, rng: random.Random | None = None) -> int:
    """c = g^m * r^n mod n^2 with a fresh r drawn from Z*_n."""
    _check_plaintext(public_key, m)
    n, n2 = public_key.n, public_key.n_squared
    r = random_below_coprime(n, rng)
    return (pow(public_key.g, m, n2) * pow(r, n, n2)) % n2


def decrypt(private_key: PrivateKey, c: int) -> int:
    pk = private_key.public_key
    _check_ciphertext(pk, c)
    u = pow(c, private_key.lambda_dec, pk.n_squared)
    return (L(u, pk.n) * private_key.mu) % pk.n


def decrypt_signed(private_key: PrivateKey, c: int) -> int:
    """Decrypt, reading values above n // 2 as negatives (m - n)."""
    m = decrypt(private_key, c)
    n = private_key.public_key.n
    return m - n if m > n // 2 else m


def add_encrypted(public_key: PublicKey, c1: int, c2: int) -> int:
    """E(m1) * E(m2) = E(m1 + m2 mod n)"""
    _check_ciphertext(public_key, c1)
    _check_ciphertext(public_key, c2)
    return (c1 * c2) % public_key.n_squared


def additive_inverse(public_key: PublicKey, c: int) -> int:
    # c^{n-1} encrypts (n-1)*m == -m mod n; it is not the inverse of c mod n^2
    _check_ciphertext(public_key, c)
    return mod_pow(c, public_key.n - 1, public_key.n_squared)


def subtract_encrypted(public_key: PublicKey, c1: int, c2: int) -> int:
    """E(m1) * E(-m2) = E(m1 - m2 mod n)"""
    return add_encrypted(public_key, c1, additive_inverse(public_key, c2))


def add_plain(public_key: PublicKey, c: int, k: int) -> int:
    """E(m) * g^k = E(m + k mod n); k may be negative."""
    _check_ciphertext(public_key, c)
    n2 = public_key.n_squared
    return (c * pow(public_key.g, k % public_key.n, n2)) % n2


def scalar_multiply(public_key: PublicKey, c: int, k: int) -> int:
    """E(m)^k = E(k * m mod n); k is reduced mod n so negatives work too."""
    _check_ciphertext(public_key, c)
    return pow(c, k % public_key.n, public_key.n_squared)


def rerandomize(public_key: PublicKey, c: int, rng: random.Random | None = None) -> int:
    """Multiply by a fresh encryption of zero: same plaintext, unlinkable ciphertext."""
    _check_ciphertext(public_key, c)
    n, n2 = public_key.n, public_key.n_squared
    r = random_below_coprime(n, rng)
    return (c * pow(r, n, n2)) % n2


class Paillier:
    """
    Key pair plus the cipher operations bound to it.

    A Paillier built from a public key alone can encrypt and combine
    ciphertexts; decryption needs the private key.
    """

    def __init__(self, public_key: PublicKey, private_key: PrivateKey | None = None,
                 rng: random.Random | None = None):
        if private_key is not None and private_key.public_key != public_key:
            raise InvalidInput("private key does not belong to this public key")
        self.public_key = public_key
        self.private_key = private_key
        self.rng = rng

    @classmethod
    def keygen(cls, bit_length: int = DEFAULT_KEY_BITS,
               rng: random.Random | None = None) -> "Paillier":
        public_key, private_key = generate_keypair(bit_length, rng)
        return cls(public_key, private_key, rng)

    @property
    def n(self) -> int:
        return self.public_key.n

    @property
    def n2(self) -> int:
        return self.public_key.n_squared

    def _require_private_key(self) -> PrivateKey:
        if self.private_key is None:
            raise MissingPrivateKey("this Paillier instance holds no private key")
        return self.private_key

    def encrypt(self, m: int) -> int:
        return encrypt(self.public_key, m, self.rng)

    def decrypt(self, c: int) -> int:
        return decrypt(self._require_private_key(), c)

    def decrypt_signed(self, c: int) -> int:
        return decrypt_signed(self._require_private_key(), c)

    def add(self, c1: int, c2: int) -> int:
        return add_encrypted(self.public_key, c1, c2)

    def negate(self, c: int) -> int:
        return additive_inverse(self.public_key, c)

    def subtract(self, c1: int, c2: int) -> int:
        return subtract_encrypted(self.public_key, c1, c2)

    def add_plain(self, c: int, k: int) -> int:
        return add_plain(self.public_key, c, k)

    def scalar_multiply(self, c: int, k: int) -> int:
        return scalar_multiply(self.public_key, c, k)

    def rerandomize(self, c: int) -> int:
        return rerandomize(self.public_key, c, self.rng)
