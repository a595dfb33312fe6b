"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import logging
import random

import pytest

from weiermont.crypto.inverse import mod_inverse
from weiermont.crypto.tonelli import isQuadraticResidue, mod_sqrt
from weiermont.curve.montgomery import (
    MontgomeryCurve,
    MontgomeryImage,
    transform_to_montgomery,
)
from weiermont.curve.weierstrass import WeierstrassCurve


def test_documented_example():
    """
    y² = x³ + 8x + 2 over F_17 has the single 2-torsion root α = 8.
    3α² + a = 13 = 8², so 1/s = 15 and the point (14, 6) maps to (5, 5) on
    15y² = x³ + 3x² + x.
    """
    res = transform_to_montgomery(14, 6, 8, 2, 17)
    assert res == (5, 5, 3, 15)
    assert isinstance(res, MontgomeryImage)
    x, y, A, B = res
    assert (B * y * y - (x ** 3 + A * x * x + x)) % 17 == 0
    assert res.curve(17) == MontgomeryCurve(3, 15, 17)
    assert res.curve(17).isAffineOnCurve(res.x, res.y)
    assert transform_to_montgomery(14, 6, 8, 2, 17, scanLimit=0) == res


def test_montgomery_curve():
    c = MontgomeryCurve(3 + 17, -2, 17)
    assert (c.A, c.B, c.P) == (3, 15, 17)
    assert repr(c) == "MontgomeryCurve(A=3, B=15, p=17)"
    assert c.isAffineOnCurve(0, 0)
    assert c.isAffineOnCurve(5, 5)
    assert not c.isAffineOnCurve(5, 6)


def test_whole_curve():
    # Every point of y² = x³ + 8x + 2 over F_17 lands on the same
    # Montgomery curve.
    p = 17
    w = WeierstrassCurve(8, 2, p)
    points = [(x, y) for x in range(p) for y in range(p) if w.isAffineOnCurve(x, y)]
    assert points
    images = {}
    for x, y in points:
        res = transform_to_montgomery(x, y, 8, 2, p)
        assert res.curve(p).isAffineOnCurve(res.x, res.y)
        images[(res.x, res.y)] = (x, y)
        assert (res.A, res.B) == (3, 15)
    # The map is injective.
    assert len(images) == len(points)
    # (α, 0) maps to the Montgomery 2-torsion point (0, 0).
    assert transform_to_montgomery(8, 0, 8, 2, p)[:2] == (0, 0)


def _singleRootCurve(rng, p, wantResidue):
    """
    Build y² = (x - α)(x² + αx + c) with an irreducible quadratic factor, so
    α is the only 2-torsion root. wantResidue picks whether 3α² + a is a
    square.
    """
    while True:
        alpha = rng.randrange(p)
        c = rng.randrange(p)
        if isQuadraticResidue(alpha * alpha - 4 * c, p):
            continue
        a = (c - alpha * alpha) % p
        b = (-alpha * c) % p
        sSquared = (3 * alpha * alpha + a) % p
        if sSquared == 0 or isQuadraticResidue(sSquared, p) != wantResidue:
            continue
        return alpha, a, b


def _randPoint(rng, w):
    p = w.P
    while True:
        x = rng.randrange(p)
        y = mod_sqrt(w.evalCubic(x), p)
        if y is not None:
            return x, y


@pytest.mark.parametrize("p", [101, 65537, 2 ** 61 - 1, 2 ** 127 - 1, 2 ** 255 - 19])
def test_random_curves(p):
    rng = random.Random(p)
    for _ in range(5):
        alpha, a, b = _singleRootCurve(rng, p, True)
        w = WeierstrassCurve(a, b, p)
        assert w.twoTorsionRoots() == [alpha]
        x, y = _randPoint(rng, w)
        res = transform_to_montgomery(x, y, a, b, p)
        assert res is not None
        for v in res:
            assert 0 <= v < p
        assert res.curve(p).isAffineOnCurve(res.x, res.y)
        # Undo the map with s = 1/B.
        s = mod_inverse(res.B, p)
        assert (res.x * s + alpha) % p == x
        assert res.y * s % p == y
        assert res.A == 3 * alpha * res.B % p


@pytest.mark.parametrize("p", [101, 65537, 2 ** 255 - 19])
def test_non_residue(prepareLogger, p, caplog):
    caplog.set_level(logging.DEBUG, logger="MONTGOMERY")
    rng = random.Random(p)
    alpha, a, b = _singleRootCurve(rng, p, False)
    x, y = _randPoint(rng, WeierstrassCurve(a, b, p))
    assert transform_to_montgomery(x, y, a, b, p) is None
    assert "NoValidTransformation" in caplog.text


def test_no_root(prepareLogger):
    p = 17
    for a in range(p):
        for b in range(p):
            if not WeierstrassCurve(a, b, p).twoTorsionRoots():
                assert transform_to_montgomery(1, 1, a, b, p) is None


def test_singular(prepareLogger):
    # y² = x³ has the triple root 0, so 3α² + a = 0.
    assert transform_to_montgomery(1, 1, 0, 0, 17) is None
    # x³ - 3x + 2 = (x - 1)²(x + 2). The smallest root 1 is the double one.
    assert WeierstrassCurve(-3, 2, 17).twoTorsionRoots() == [1, 15]
    assert transform_to_montgomery(3, 1, -3, 2, 17) is None


def test_unreduced_inputs():
    p = 17
    want = transform_to_montgomery(14, 6, 8, 2, p)
    assert transform_to_montgomery(14 - p, 6 + 3 * p, 8 + p, 2 - p, p) == want
