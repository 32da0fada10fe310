"""
Error types common to every field and curve in this package.
"""


class BnFieldException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown during normal
    operation.
    """


class InvalidCurve(BnFieldException, ValueError):
    """
    Thrown when curve parameters do not describe a non-singular
    short-Weierstrass curve.
    """


class InvalidFieldParameters(BnFieldException, ValueError):
    """
    Thrown when a field type is declared with an unusable modulus or with a
    `BETA` that is a quadratic residue.
    """


class DivisionByZero(BnFieldException, ZeroDivisionError):
    """
    Thrown when inverting (or dividing by) the additive identity of a field.
    """
