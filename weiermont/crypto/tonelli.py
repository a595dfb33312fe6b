"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Modular square roots over a prime field.

References:
  [GECC]: Guide to Elliptic Curve Cryptography (Hankerson, Menezes, Vanstone)

  [HAC]: Handbook of Applied Cryptography (Menezes, van Oorschot, Vanstone),
    algorithm 3.34
"""

from weiermont import NO_SQUARE_ROOT
from weiermont.util import helpers


log = helpers.getLogger("TONELLI")


def isQuadraticResidue(value, p):
    """
    Euler's criterion. Zero is counted as a residue since it has the square
    root 0.

    Args:
        value (int): The value to test.
        p (int): An odd prime.

    Returns:
        bool: True if value is a square modulo p.
    """
    value %= p
    if value == 0:
        return True
    return pow(value, (p - 1) // 2, p) == 1


def findNonResidue(p, rng=None):
    """
    Find a quadratic non-residue modulo the odd prime p. Without an rng, the
    smallest non-residue >= 2 is returned. With an rng, candidates are drawn
    from [2, p) instead. Half of the non-zero residues are non-residues, so
    either search finishes quickly.

    Args:
        p (int): An odd prime.
        rng (random.Random): Optional source for candidate selection.

    Returns:
        int: A non-residue.
    """
    if rng is None:
        z = 2
        while isQuadraticResidue(z, p):
            z += 1
        return z
    while True:
        z = rng.randrange(2, p)
        if not isQuadraticResidue(z, p):
            return z


def mod_sqrt(value, p, rng=None):
    """
    Tonelli-Shanks modular square root. p is assumed to be an odd prime.
    This is not checked.

    The result is one of the two roots. The other one is p - root.

    Args:
        value (int): The value to take the root of. It is reduced modulo p.
        p (int): The prime modulus.
        rng (random.Random): Optional, passed to findNonResidue.

    Returns:
        int or None: A root in [0, p), or None if value is a quadratic
            non-residue.
    """
    value %= p
    if value == 0:
        return 0
    if p == 2:
        return value

    if pow(value, (p - 1) // 2, p) != 1:
        log.debug(f"{NO_SQUARE_ROOT}: {value} is not a square modulo {p}")
        return None

    if p % 4 == 3:
        return pow(value, (p + 1) // 4, p)

    # p - 1 = q * 2^s with q odd. s >= 2 here.
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1

    z = findNonResidue(p, rng)

    m = s
    c = pow(z, q, p)
    t = pow(value, q, p)
    r = pow(value, (q + 1) // 2, p)

    while t != 1:
        # Least i, 0 < i < m, with t^(2^i) = 1.
        i, t2i = 0, t
        while t2i != 1:
            t2i = t2i * t2i % p
            i += 1
            if i == m:
                # Only reachable when p is not prime.
                log.debug(f"{NO_SQUARE_ROOT}: no 2^i order for {value} modulo {p}")
                return None

        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = b * b % p
        t = t * c % p
        r = r * b % p

    return r
