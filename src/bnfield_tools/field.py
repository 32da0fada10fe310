"""
Check the parameters of a quadratic extension field.
"""

import argparse
from typing import Any, TextIO

from bnfield.exceptions import InvalidFieldParameters
from bnfield.finite_field import (
    is_probable_prime,
    legendre_symbol,
    quadratic_extension,
)

from .utils import get_logger, parse_hex_or_int


def field_arguments(subparsers: argparse._SubParsersAction) -> None:
    """
    Adds the arguments for the field tool subparser.
    """
    field_parser = subparsers.add_parser(
        "field",
        help="Checks that BETA is a quadratic non-residue modulo P.",
    )

    field_parser.add_argument("prime", type=parse_hex_or_int)
    field_parser.add_argument("beta", type=parse_hex_or_int)


class FieldTool:
    """
    Check that `F_p[u]/(u^2 - beta)` is a field and print the Legendre
    symbol of `beta`.
    """

    def __init__(self, options: Any, out_file: TextIO) -> None:
        self.prime: int = options.prime
        self.beta: int = options.beta
        self.log_level: str = options.log_level
        self.out_file = out_file

    def run(self) -> int:
        """
        Build the extension, reporting whether the parameters are valid.
        """
        logger = get_logger(self.log_level)

        try:
            quadratic_extension("Fp2", self.prime, self.beta)
        except InvalidFieldParameters as e:
            logger.error("invalid field: %s", e)
            if is_probable_prime(self.prime) and self.prime > 2:
                self.out_file.write(
                    f"{legendre_symbol(self.beta, self.prime)}\n"
                )
            return 1

        logger.info(
            "%d is a quadratic non-residue modulo %d", self.beta, self.prime
        )
        self.out_file.write(f"{legendre_symbol(self.beta, self.prime)}\n")
        return 0
