"""
Copyright (c) 2020, The Decred developers

This example script maps the point (14, 6) on the curve
y² = x³ + 8x + 2 over F_17 to its Montgomery form and prints the result.
"""

from weiermont.curve.montgomery import transform_to_montgomery


# Example values for a Weierstrass curve over F_p.
A = 8
B = 2
P = 17

X = 14
Y = 6


def main():
    result = transform_to_montgomery(X, Y, A, B, P)
    if result is None:
        print("No valid transformation found.")
        return

    print("x_montgomery: %d" % result.x)
    print("y_montgomery: %d" % result.y)
    print("a_montgomery: %d" % result.A)
    print("b_montgomery: %d" % result.B)

    curve = result.curve(P)
    print("on %r: %s" % (curve, curve.isAffineOnCurve(result.x, result.y)))


if __name__ == "__main__":
    main()
