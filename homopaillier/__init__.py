"""
homopaillier package initializer.

Paillier additively homomorphic encryption:
    from homopaillier import generate_keypair, encrypt, decrypt, add_encrypted
"""
from .Homo.errors import InvalidInput, MissingPrivateKey
from .Homo.paillier import (
    Paillier,
    PrivateKey,
    PublicKey,
    add_encrypted,
    add_plain,
    additive_inverse,
    decrypt,
    decrypt_signed,
    encrypt,
    generate_keypair,
    rerandomize,
    scalar_multiply,
    subtract_encrypted,
)
from .Homo.primes import generate_prime, is_probable_prime
from .Homo.utils import L, lcm, mod_inverse, mod_pow

__all__ = [
    "InvalidInput", "MissingPrivateKey",
    "Paillier", "PublicKey", "PrivateKey",
    "generate_keypair", "encrypt", "decrypt", "decrypt_signed",
    "add_encrypted", "additive_inverse", "subtract_encrypted",
    "add_plain", "scalar_multiply", "rerandomize",
    "is_probable_prime", "generate_prime",
    "lcm", "L", "mod_inverse", "mod_pow",
]
