"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

# Failure kinds. The arithmetic never raises these. A failing routine returns
# None and names the kind in its debug log.
NO_INVERSE = "NoInverse"
NO_SQUARE_ROOT = "NoSquareRoot"
NO_VALID_ROOT = "NoValidRoot"
NO_VALID_TRANSFORMATION = "NoValidTransformation"


class WeierMontError(Exception):
    pass
