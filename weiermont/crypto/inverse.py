"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Extended Euclidean algorithm and the modular inverse built on it.
"""

from weiermont import NO_INVERSE
from weiermont.util import helpers


log = helpers.getLogger("INVERSE")


def extended_gcd(a, b):
    """
    Calculate the extended Euclidean algorithm. ax + by = gcd(a,b)

    Works for any signs, and for zeros. The returned gcd is never negative.

    Args:
        a (int): An integer.
        b (int): Another integer.

    Returns:
        int: Greatest common divisor of |a| and |b|.
        int: x coefficient of Bezout's identity.
        int: y coefficient of Bezout's identity.
    """
    # Both rows satisfy r = a*s + b*t throughout.
    oldR, r = a, b
    oldS, s = 1, 0
    oldT, t = 0, 1
    while r != 0:
        q = oldR // r
        oldR, r = r, oldR - q * r
        oldS, s = s, oldS - q * s
        oldT, t = t, oldT - q * t
    if oldR < 0:
        return -oldR, -oldS, -oldT
    return oldR, oldS, oldT


def mod_inverse(value, modulus):
    """
    The multiplicative inverse of value modulo modulus.

    Args:
        value (int): The value to invert. Any integer, it is reduced first.
        modulus (int): The modulus, expected to be > 1.

    Returns:
        int or None: The inverse in the range [0, modulus), or None if value
            shares a factor with modulus.
    """
    g, x, _ = extended_gcd(value % modulus, modulus)
    if g != 1:
        log.debug(f"{NO_INVERSE}: gcd({value}, {modulus}) = {g}")
        return None
    return x % modulus
