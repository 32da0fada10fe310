"""
The alt_bn128 curve
^^^^^^^^^^^^^^^^^^^

Base field, quadratic extension and curve coefficients of the
Barreto-Naehrig curve `y^2 = x^3 + 3` known as alt_bn128 (or BN254).
"""

from ethereum_types.numeric import Uint

from . import elliptic_curve, finite_field

ALT_BN128_PRIME = 21888242871839275222246405745257275088696311157297823662689037894645226208583  # noqa: E501


class BNF(finite_field.PrimeField):
    """
    The prime field over which the alt_bn128 curve is defined.
    """

    __slots__ = ()
    PRIME = ALT_BN128_PRIME


class BNF2(finite_field.QuadraticExtensionField):
    """
    `BNF` extended with a square root of -1 (`u`). The prime is 3 mod 4, so
    -1 is a non-residue.
    """

    __slots__ = ()
    BASE_FIELD = BNF
    BETA = -1

    u: "BNF2"
    xi: "BNF2"


BNF2.u = BNF2((0, 1))
"""autoapi_noindex"""

BNF2.xi = BNF2(BNF2.XI)
"""autoapi_noindex"""


BN_CURVE = elliptic_curve.CurveParams(
    Uint(ALT_BN128_PRIME), Uint(0), Uint(3)
)
"""
Coefficients of alt_bn128 over `BNF`.
"""
