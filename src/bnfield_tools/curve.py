"""
Validate short-Weierstrass curve parameters.
"""

import argparse
from typing import Any, TextIO

from bnfield.elliptic_curve import CurveParams, discriminant
from bnfield.exceptions import InvalidCurve

from .utils import get_logger, parse_hex_or_int


def curve_arguments(subparsers: argparse._SubParsersAction) -> None:
    """
    Adds the arguments for the curve tool subparser.
    """
    curve_parser = subparsers.add_parser(
        "curve",
        help="Checks that y^2 = x^3 + ax + b is non-singular modulo p.",
    )

    curve_parser.add_argument("p", type=parse_hex_or_int)
    curve_parser.add_argument("a", type=parse_hex_or_int)
    curve_parser.add_argument("b", type=parse_hex_or_int)


class CurveTool:
    """
    Validate a curve and print its discriminant.
    """

    def __init__(self, options: Any, out_file: TextIO) -> None:
        self.p: int = options.p
        self.a: int = options.a
        self.b: int = options.b
        self.log_level: str = options.log_level
        self.out_file = out_file

    def run(self) -> int:
        """
        Construct the curve parameters, reporting whether they are valid.
        """
        logger = get_logger(self.log_level)

        try:
            curve = CurveParams(
                self.p, self.a, self.b  # type: ignore[arg-type]
            )
        except InvalidCurve as e:
            logger.error("invalid curve: %s", e)
            return 1

        logger.info(
            "y^2 = x^3 + %dx + %d is non-singular modulo %d",
            int(curve.a),
            int(curve.b),
            int(curve.p),
        )
        self.out_file.write(
            f"{discriminant(int(curve.p), int(curve.a), int(curve.b))}\n"
        )
        return 0
