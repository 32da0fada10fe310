"""
Elliptic Curves
^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

An elliptic curve over a prime field is the set of points `(x, y)` with
`y^2 = x^3 + a*x + b (mod p)`. Together with the point at infinity these
points form an abelian group only when the curve is non-singular, that is
when `4a^3 + 27b^2` is non-zero modulo `p`.
"""

from dataclasses import dataclass

from ethereum_types.frozen import slotted_freezable
from ethereum_types.numeric import Uint

from .exceptions import InvalidCurve
from .utils.ensure import ensure


def discriminant(p: int, a: int, b: int) -> int:
    """
    Computes `(4a^3 + 27b^2) mod p` for the curve `y^2 = x^3 + ax + b`.

    Parameters
    ----------
    p :
        Field modulus.
    a :
        Coefficient of `x`.
    b :
        Constant coefficient.

    Returns
    -------
    discriminant : `int`
        The reduced discriminant. Zero means the curve is singular.
    """
    return (4 * pow(a, 3, p) + 27 * pow(b, 2, p)) % p


@slotted_freezable
@dataclass
class CurveParams:
    """
    Parameters of a short-Weierstrass curve `y^2 = x^3 + ax + b` over the
    prime field of order `p`. `a` and `b` are stored reduced modulo `p`.

    Construction raises `InvalidCurve` if the curve is singular.
    """

    p: Uint
    a: Uint
    b: Uint

    def __post_init__(self) -> None:
        p, a, b = int(self.p), int(self.a), int(self.b)

        ensure(
            p > 3, InvalidCurve(f"characteristic {p} is not supported")
        )
        ensure(
            discriminant(p, a, b) != 0,
            InvalidCurve(f"curve y^2 = x^3 + {a}x + {b} mod {p} is singular"),
        )

        self.p = Uint(p)
        self.a = Uint(a % p)
        self.b = Uint(b % p)

    def __hash__(self) -> int:
        return hash((int(self.p), int(self.a), int(self.b)))
