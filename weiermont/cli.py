"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Command line driver. Maps a point on y² = x³ + ax + b (mod p) to its
Montgomery image and prints the result.

    $ weiermont 14 6 8 2 17
"""

import argparse
import sys

from weiermont import WeierMontError, config
from weiermont.curve.montgomery import transform_to_montgomery
from weiermont.util import helpers


log = helpers.getLogger("CLI")

NO_TRANSFORMATION_MSG = "No valid transformation found."


def parseInt(s):
    """
    Parse an integer literal. Base prefixes such as 0x are honored.
    """
    try:
        return int(s, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer {s!r}")


def makeParser():
    parser = argparse.ArgumentParser(
        prog="weiermont",
        description="Map a short Weierstrass point to its Montgomery form.",
    )
    parser.add_argument("x", type=parseInt, help="point x coordinate")
    parser.add_argument("y", type=parseInt, help="point y coordinate")
    parser.add_argument("a", type=parseInt, help="Weierstrass a coefficient")
    parser.add_argument("b", type=parseInt, help="Weierstrass b coefficient")
    parser.add_argument("p", type=parseInt, help="field prime")
    parser.add_argument(
        "--scan-limit",
        type=parseInt,
        default=None,
        help="largest field searched element by element for a 2-torsion root",
    )
    parser.add_argument("--log-level", default=None, help="e.g. debug, info")
    parser.add_argument("--log-file", default=None, help="rotating log file path")
    parser.add_argument("--config", default=None, help="configuration file path")
    return parser


def main(argv=None):
    """
    Run the driver.

    Args:
        argv (list(str)): The arguments, without the program name. Defaults
            to sys.argv[1:].

    Returns:
        int: The exit status. 0 on success, 1 if no transformation exists,
            2 for configuration errors.
    """
    args = makeParser().parse_args(argv)
    try:
        cfg = config.load(args.config)
        logLvl = helpers.getLogLevel(args.log_level or cfg.get("logLevel"))
        scanLimit = args.scan_limit
        if scanLimit is None:
            scanLimit = cfg.get("scanLimit")
        helpers.prepareLogging(args.log_file or cfg.get("logFile"), logLvl)
    except (WeierMontError, OSError) as e:
        print(f"configuration error: {e}", file=sys.stderr)
        return 2

    try:
        result = transform_to_montgomery(
            args.x, args.y, args.a, args.b, args.p, scanLimit=scanLimit
        )
    except Exception as e:
        log.error(f"transformation error: {helpers.formatTraceback(e)}")
        raise

    if result is None:
        print(NO_TRANSFORMATION_MSG)
        return 1

    print(f"x_montgomery: {result.x}")
    print(f"y_montgomery: {result.y}")
    print(f"a_montgomery: {result.A}")
    print(f"b_montgomery: {result.B}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
