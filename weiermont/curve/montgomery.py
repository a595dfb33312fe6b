"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Montgomery curves By² = x³ + Ax² + x, and the birational map taking a point
on a short Weierstrass curve to its Montgomery image.

Given a root α of x³ + ax + b and s with s² = 3α² + a, the map is

    A = 3α/s,  B = 1/s,  (x, y) -> ((x - α)/s, y/s)

References:
  [OKEYA]: Okeya, Kurumatani, Sakurai. Elliptic curves with the
    Montgomery-form and their cryptographic applications.
"""

from typing import NamedTuple

from weiermont import NO_VALID_TRANSFORMATION
from weiermont.crypto.inverse import mod_inverse
from weiermont.crypto.tonelli import mod_sqrt
from weiermont.util import helpers

from .weierstrass import DEFAULT_SCAN_LIMIT, WeierstrassCurve


log = helpers.getLogger("MONTGOMERY")


class MontgomeryCurve:
    """
    MontgomeryCurve holds the parameters of By² = x³ + Ax² + x (mod P).
    """

    def __init__(self, A, B, p):
        self.P = p
        self.A = A % p
        self.B = B % p

    def __repr__(self):
        return f"MontgomeryCurve(A={self.A}, B={self.B}, p={self.P})"

    def __eq__(self, other):
        return (self.A, self.B, self.P) == (other.A, other.B, other.P)

    def isAffineOnCurve(self, x, y):
        """
        isAffineOnCurve returns boolean if the point (x,y) is on the curve.
        """
        p = self.P
        # By² = x³ + Ax² + x
        lhs = self.B * y * y % p
        rhs = (x * x * x + self.A * x * x + x) % p
        return lhs == rhs


class MontgomeryImage(NamedTuple):
    """
    The mapped point and the parameters of the Montgomery curve it lies on.
    """

    x: int
    y: int
    A: int
    B: int

    def curve(self, p: int) -> MontgomeryCurve:
        return MontgomeryCurve(self.A, self.B, p)


def transform_to_montgomery(x, y, a, b, p, scanLimit=DEFAULT_SCAN_LIMIT):
    """
    Map the point (x, y) on y² = x³ + ax + b (mod p) to the Montgomery form.
    The point is not checked against the curve.

    The smallest 2-torsion root is used. A failure with that root is not
    retried with another one.

    Args:
        x (int): The point's x coordinate.
        y (int): The point's y coordinate.
        a (int): The Weierstrass a coefficient.
        b (int): The Weierstrass b coefficient.
        p (int): The field prime.
        scanLimit (int): Passed to WeierstrassCurve.twoTorsionRoot.

    Returns:
        MontgomeryImage or None: The point and curve parameters, each in
            [0, p), or None if the curve has no 2-torsion point, 3α² + a is
            not a square, or its root is not invertible.
    """
    alpha = WeierstrassCurve(a, b, p).twoTorsionRoot(scanLimit)
    if alpha is None:
        return None

    sSquared = (3 * alpha * alpha + a) % p
    s = mod_sqrt(sSquared, p)
    if s is None:
        log.debug(f"{NO_VALID_TRANSFORMATION}: 3α² + a = {sSquared} has no root")
        return None

    sInv = mod_inverse(s, p)
    if sInv is None:
        log.debug(f"{NO_VALID_TRANSFORMATION}: singular curve, 3α² + a = 0")
        return None

    A = 3 * alpha * sInv % p
    B = sInv
    xMont = (x - alpha) * sInv % p
    yMont = y * sInv % p
    return MontgomeryImage(xMont, yMont, A, B)
