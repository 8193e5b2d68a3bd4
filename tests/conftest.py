import random

import pytest

from homopaillier import Paillier, generate_keypair

KEY_BITS = 256


@pytest.fixture
def rng():
    return random.Random(20240611)


@pytest.fixture(scope="session")
def keypair():
    return generate_keypair(KEY_BITS, random.Random(1729))


@pytest.fixture(scope="session")
def public_key(keypair):
    return keypair[0]


@pytest.fixture(scope="session")
def private_key(keypair):
    return keypair[1]


@pytest.fixture
def paillier(keypair):
    public_key, private_key = keypair
    return Paillier(public_key, private_key, rng=random.Random(42))
