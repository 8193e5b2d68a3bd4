# homopaillier/Homo/errors.py


class InvalidInput(ValueError):
    """Argument outside the domain the Paillier arithmetic is defined on."""


class MissingPrivateKey(InvalidInput):
    """Decryption requested on a Paillier instance holding only a public key."""
