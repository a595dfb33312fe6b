"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Short Weierstrass curves y² = x³ + ax + b over a prime field, and the search
for their 2-torsion points (α, 0), where α is a root of the curve cubic.

References:
  [GECC]: Guide to Elliptic Curve Cryptography (Hankerson, Menezes, Vanstone)
"""

from weiermont import NO_VALID_ROOT
from weiermont.crypto import polynomial
from weiermont.util import helpers


log = helpers.getLogger("WEIERSTRASS")

# Fields up to this size are searched by evaluating the cubic at every
# element. Larger fields use polynomial root finding.
DEFAULT_SCAN_LIMIT = 1 << 16


class WeierstrassCurve:
    """
    WeierstrassCurve holds the parameters of y² = x³ + ax + b (mod P). The
    coefficients are stored reduced. The discriminant is not checked, so
    singular curves are accepted.
    """

    def __init__(self, a, b, p):
        self.P = p
        self.a = a % p
        self.b = b % p

    def __repr__(self):
        return f"WeierstrassCurve(a={self.a}, b={self.b}, p={self.P})"

    def __eq__(self, other):
        return (self.a, self.b, self.P) == (other.a, other.b, other.P)

    def cubic(self):
        """
        The right-hand side x³ + ax + b as a polynomial, lowest degree first.
        """
        return [self.b, self.a, 0, 1]

    def evalCubic(self, t):
        return (t * t * t + self.a * t + self.b) % self.P

    def isAffineOnCurve(self, x, y):
        """
        isAffineOnCurve returns boolean if the point (x,y) is on the curve.
        """
        # y² = x³ + ax + b
        return y * y % self.P == self.evalCubic(x)

    def twoTorsionRoots(self, scanLimit=DEFAULT_SCAN_LIMIT):
        """
        All roots α of x³ + ax + b in [0, P). Each gives a point (α, 0) of
        order two.

        Args:
            scanLimit (int): Fields with P <= scanLimit are scanned element
                by element. Larger fields go through polynomial root finding.
                Both return the same list.

        Returns:
            list(int): The distinct roots, ascending.
        """
        p = self.P
        if p <= max(scanLimit, 2):
            return [t for t in range(p) if self.evalCubic(t) == 0]
        return polynomial.roots(self.cubic(), p)

    def twoTorsionRoot(self, scanLimit=DEFAULT_SCAN_LIMIT):
        """
        The smallest root of the curve cubic.

        Returns:
            int or None: The root, or None if the cubic has no root in the
                field.
        """
        roots = self.twoTorsionRoots(scanLimit)
        if not roots:
            log.debug(f"{NO_VALID_ROOT}: no 2-torsion point on {self!r}")
            return None
        return roots[0]
