"""
BN Field Arithmetic
^^^^^^^^^^^^^^^^^^^
Pairing-friendly elliptic curves such as alt_bn128 are built on top of a
small number of primitives: the prime field the curve is defined over, a
quadratic extension of that field used as the coordinate field of the
twisted curve, and a set of curve coefficients that must describe a
non-singular curve.

This package provides those primitives, written as simply as possible, so
that group-law and pairing code can be layered on top of them without
having to re-check any arithmetic.
"""

__version__ = "0.1.0"
