"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Polynomials over the prime field F_p, used to find the roots of the curve
cubic when the field is too large to scan.

A polynomial is a list of int coefficients, lowest degree first, each in
[0, p). The zero polynomial is the empty list.

References:
  [GECC]: Guide to Elliptic Curve Cryptography (Hankerson, Menezes, Vanstone)

  [CZ81]: Cantor, Zassenhaus. A new algorithm for factoring polynomials over
    finite fields.
"""

from weiermont.crypto.inverse import mod_inverse


def trim(f):
    """
    Remove the zero coefficients at the top.
    """
    f = list(f)
    while f and f[-1] == 0:
        f.pop()
    return f


def reduce(f, p):
    """
    Reduce the coefficients modulo p and trim.
    """
    return trim(c % p for c in f)


def degree(f):
    """
    The degree of f. The zero polynomial has degree -1.
    """
    return len(trim(f)) - 1


def sub(f, g, p):
    n = max(len(f), len(g))
    f = list(f) + [0] * (n - len(f))
    g = list(g) + [0] * (n - len(g))
    return reduce((a - b for a, b in zip(f, g)), p)


def mul(f, g, p):
    if not f or not g:
        return []
    out = [0] * (len(f) + len(g) - 1)
    for i, a in enumerate(f):
        if a == 0:
            continue
        for j, b in enumerate(g):
            out[i + j] += a * b
    return reduce(out, p)


def divMod(f, g, p):
    """
    Polynomial long division.

    Args:
        f (list(int)): The dividend.
        g (list(int)): The divisor. Must be non-zero.
        p (int): The prime modulus.

    Returns:
        list(int): The quotient.
        list(int): The remainder, with degree less than g.
    """
    f, g = reduce(f, p), reduce(g, p)
    if not g:
        raise ZeroDivisionError("polynomial division by zero")
    lcInv = mod_inverse(g[-1], p)
    q = [0] * max(len(f) - len(g) + 1, 0)
    while len(f) >= len(g):
        c, k = f[-1] * lcInv % p, len(f) - len(g)
        q[k] = c
        for i, b in enumerate(g):
            f[k + i] = (f[k + i] - c * b) % p
        f = trim(f)
    return trim(q), f


def mod(f, g, p):
    return divMod(f, g, p)[1]


def monic(f, p):
    """
    Scale f so that its leading coefficient is 1.
    """
    f = reduce(f, p)
    if not f:
        return f
    lcInv = mod_inverse(f[-1], p)
    return [c * lcInv % p for c in f]


def gcd(f, g, p):
    """
    The monic greatest common divisor of f and g. gcd(0, 0) is 0.
    """
    f, g = reduce(f, p), reduce(g, p)
    while g:
        f, g = g, mod(f, g, p)
    return monic(f, p)


def powMod(f, e, m, p):
    """
    f^e mod m by square-and-multiply.

    Args:
        f (list(int)): The base.
        e (int): A non-negative exponent.
        m (list(int)): The modulus polynomial, degree >= 1.
        p (int): The prime modulus.

    Returns:
        list(int): The remainder of f^e divided by m.
    """
    out, base = mod([1], m, p), mod(f, m, p)
    while e:
        if e & 1:
            out = mod(mul(out, base, p), m, p)
        base, e = mod(mul(base, base, p), m, p), e >> 1
    return out


def evaluate(f, x, p):
    """
    Evaluate f at x with Horner's rule.
    """
    acc = 0
    for c in reversed(f):
        acc = (acc * x + c) % p
    return acc


def _splitLinear(g, p):
    """
    Split a monic, square-free product of distinct linear factors into its
    roots. For each shift d = 0, 1, 2, ..., gcd((x + d)^((p-1)/2) - 1, g)
    collects the roots r with r + d a non-zero square. Two distinct roots are
    separated by some d < p.
    """
    n = degree(g)
    if n < 1:
        return []
    if n == 1:
        return [(-g[0]) % p]
    e = (p - 1) // 2
    for d in range(p):
        h = gcd(sub(powMod([d, 1], e, g, p), [1], p), g, p)
        if 0 < degree(h) < n:
            return _splitLinear(h, p) + _splitLinear(divMod(g, h, p)[0], p)
    raise ArithmeticError("polynomial does not split into distinct linear factors")


def roots(f, p):
    """
    The distinct roots of f in F_p, for an odd prime p.

    The linear part g = gcd(x^p - x, f) is computed first, then split with
    deterministic shifts.

    Args:
        f (list(int)): A non-zero polynomial.
        p (int): An odd prime.

    Returns:
        list(int): The roots in ascending order.
    """
    f = monic(f, p)
    if degree(f) < 1:
        return []
    xp = powMod([0, 1], p, f, p)
    g = gcd(sub(xp, [0, 1], p), f, p)
    return sorted(_splitLinear(g, p))
