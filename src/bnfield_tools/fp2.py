"""
One-shot arithmetic in a quadratic extension field.
"""

import argparse
from typing import Any, Callable, Dict, List, TextIO, Tuple

from bnfield.exceptions import BnFieldException
from bnfield.finite_field import QuadraticExtensionField, quadratic_extension

from .utils import get_logger, parse_hex_or_int

Operation = Callable[..., QuadraticExtensionField]

OPERATIONS: Dict[str, Tuple[int, Operation]] = {
    "add": (2, lambda x, y: x + y),
    "sub": (2, lambda x, y: x - y),
    "mul": (2, lambda x, y: x * y),
    "square": (1, lambda x: x.square()),
    "inv": (1, lambda x: x.multiplicative_inverse()),
    "mul-xi": (1, lambda x: x.mul_by_xi()),
}


def fp2_arguments(subparsers: argparse._SubParsersAction) -> None:
    """
    Adds the arguments for the fp2 tool subparser.
    """
    fp2_parser = subparsers.add_parser(
        "fp2",
        help="Evaluates a single operation in F_p[u]/(u^2 - beta).",
    )

    fp2_parser.add_argument("--prime", type=parse_hex_or_int, required=True)
    fp2_parser.add_argument("--beta", type=parse_hex_or_int, required=True)
    fp2_parser.add_argument(
        "--xi",
        type=parse_hex_or_int,
        nargs=2,
        default=[1, 1],
        metavar=("X0", "X1"),
        help="Twist element x0 + x1*u used by mul-xi (default: 1 1).",
    )
    fp2_parser.add_argument("operation", choices=sorted(OPERATIONS))
    fp2_parser.add_argument(
        "operands",
        type=parse_hex_or_int,
        nargs="+",
        help="Coefficients a0 a1 [b0 b1], constant coefficient first.",
    )


class Fp2Tool:
    """
    Evaluate one operation and print the result as `c0 c1`.
    """

    def __init__(self, options: Any, out_file: TextIO) -> None:
        self.prime: int = options.prime
        self.beta: int = options.beta
        self.xi: List[int] = options.xi
        self.operation: str = options.operation
        self.operands: List[int] = options.operands
        self.log_level: str = options.log_level
        self.out_file = out_file

    def run(self) -> int:
        """
        Build the field, parse the operands and apply the operation.
        """
        logger = get_logger(self.log_level)

        arity, operation = OPERATIONS[self.operation]
        if len(self.operands) != 2 * arity:
            logger.error(
                "%s takes %d coefficients, got %d",
                self.operation,
                2 * arity,
                len(self.operands),
            )
            return 1

        try:
            field = quadratic_extension(
                "Fp2", self.prime, self.beta, (self.xi[0], self.xi[1])
            )
            args = [
                field(self.operands[i : i + 2])
                for i in range(0, len(self.operands), 2)
            ]
            result = operation(*args)
        except BnFieldException as e:
            logger.error("%s failed: %s", self.operation, e)
            return 1

        logger.info("%s%r = %r", self.operation, tuple(args), result)
        self.out_file.write(f"{result[0]} {result[1]}\n")
        return 0
