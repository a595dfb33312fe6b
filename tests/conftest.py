"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import pytest

from weiermont.util import helpers


# Odd primes covering both Tonelli-Shanks branches. 65537 and 2^255 - 19 have
# a large power of two in p - 1.
SMALL_PRIMES = [3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 97, 101, 113, 257]
LARGE_PRIMES = [
    65537,
    2 ** 61 - 1,
    2 ** 127 - 1,
    2 ** 255 - 19,
    # secp256k1 field prime, p = 3 mod 4.
    0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
]


@pytest.fixture(params=SMALL_PRIMES + LARGE_PRIMES)
def prime(request):
    return request.param


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()
