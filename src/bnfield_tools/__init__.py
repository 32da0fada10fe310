"""
Command line tools for inspecting field and curve parameters.
"""

import argparse
import sys
from typing import Optional, Sequence, Text, TextIO

from bnfield import __version__

from .curve import CurveTool, curve_arguments
from .field import FieldTool, field_arguments
from .fp2 import Fp2Tool, fp2_arguments

DESCRIPTION = """
Tools for the field arithmetic underneath pairing-friendly curves.

You can use this to run the following tools:
    1. curve: Check that a short-Weierstrass curve is non-singular.
    2. field: Check that BETA is a quadratic non-residue modulo P.
    3. fp2: Evaluate add, sub, mul, square, inv or mul-xi in F_p2.

Integers may be given in decimal or as 0x-prefixed hex.
"""


def create_parser() -> argparse.ArgumentParser:
    """
    Create a command-line argument parser for the bnfield tool.
    """
    new_parser = argparse.ArgumentParser(
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Add -v option to parser to show the version of the tool
    new_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show the version of the tool.",
    )
    new_parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity of the messages written to stderr.",
    )

    subparsers = new_parser.add_subparsers(dest="bnfield_tool")

    curve_arguments(subparsers)
    field_arguments(subparsers)
    fp2_arguments(subparsers)

    return new_parser


def main(
    args: Optional[Sequence[Text]] = None,
    out_file: Optional[TextIO] = None,
) -> int:
    """Run the tools based on the given options."""
    parser = create_parser()

    options = parser.parse_args(args)

    if out_file is None:
        out_file = sys.stdout

    if options.bnfield_tool == "curve":
        return CurveTool(options, out_file).run()
    elif options.bnfield_tool == "field":
        return FieldTool(options, out_file).run()
    elif options.bnfield_tool == "fp2":
        return Fp2Tool(options, out_file).run()
    else:
        parser.print_help(file=out_file)
        return 0
