from typing import Type

import pytest

from bnfield.alt_bn128 import ALT_BN128_PRIME, BNF, BNF2
from bnfield.exceptions import DivisionByZero, InvalidFieldParameters
from bnfield.finite_field import (
    PrimeField,
    QuadraticExtensionField,
    is_probable_prime,
    is_quadratic_non_residue,
    legendre_symbol,
    quadratic_extension,
)
from tests.helpers import (
    F103,
    F103_BETA5,
    karatsuba_mul,
    naive_mul,
    random_elements,
)

FIELDS = [F103, F103_BETA5, BNF2]


def test_mul_regression() -> None:
    # (2u + 3)(4u + 1) = 8u^2 + 14u + 3 = -5 + 14u
    x = F103((3, 2))
    y = F103((1, 4))
    assert x * y == F103((98, 14))
    assert (x * y)[0] == 98
    assert (x * y)[1] == 14


def test_karatsuba_in_ring() -> None:
    # u^2 + 1 is reducible modulo 101, the formula still computes the
    # product in the ring Z_101[u]/(u^2 + 1).
    assert karatsuba_mul((3, 2), (1, 4), -1, 101) == (96, 14)
    assert karatsuba_mul((3, 2), (1, 4), -1, 103) == (98, 14)
    for x, y in zip(
        random_elements(F103_BETA5, 10, seed=15),
        random_elements(F103_BETA5, 10, seed=16),
    ):
        assert F103_BETA5(karatsuba_mul(x, y, 5, 103)) == x * y


@pytest.mark.parametrize("field", FIELDS)
def test_mul_matches_naive_expansion(
    field: Type[QuadraticExtensionField],
) -> None:
    xs = random_elements(field, 20, seed=1)
    ys = random_elements(field, 20, seed=2)
    for x, y in zip(xs, ys):
        assert x * y == naive_mul(x, y)


@pytest.mark.parametrize("field", FIELDS)
def test_add_mul_commutative_associative(
    field: Type[QuadraticExtensionField],
) -> None:
    x, y, z = random_elements(field, 3, seed=3)
    assert x + y == y + x
    assert x * y == y * x
    assert (x + y) + z == x + (y + z)
    assert (x * y) * z == x * (y * z)


@pytest.mark.parametrize("field", FIELDS)
def test_mul_distributes_over_add(
    field: Type[QuadraticExtensionField],
) -> None:
    for seed in range(5):
        x, y, z = random_elements(field, 3, seed=seed)
        assert x * (y + z) == x * y + x * z
        assert (x - y) * z == x * z - y * z


@pytest.mark.parametrize("field", FIELDS)
def test_identities(field: Type[QuadraticExtensionField]) -> None:
    for x in random_elements(field, 10, seed=4):
        assert x + field.zero() == x
        assert x * field.one() == x
        assert x - x == field.zero()
        assert x + (-x) == field.zero()
        assert x * field.zero() == field.zero()


@pytest.mark.parametrize("field", FIELDS)
def test_square_matches_mul(field: Type[QuadraticExtensionField]) -> None:
    samples = random_elements(field, 25, seed=5)
    samples += [field.zero(), field.one(), field((0, 1)), field((-1, -1))]
    for x in samples:
        assert x.square() == x * x


@pytest.mark.parametrize("field", FIELDS)
def test_inverse(field: Type[QuadraticExtensionField]) -> None:
    samples = random_elements(field, 25, seed=6)
    samples += [field.one(), field((0, 1)), field((5, 0))]
    for x in samples:
        if x.is_zero():
            continue
        assert x * x.multiplicative_inverse() == field.one()
        assert x.multiplicative_inverse().multiplicative_inverse() == x


@pytest.mark.parametrize("field", FIELDS)
def test_inverse_of_zero(field: Type[QuadraticExtensionField]) -> None:
    with pytest.raises(DivisionByZero):
        field.zero().multiplicative_inverse()
    with pytest.raises(ZeroDivisionError):
        field.one() / field.zero()
    with pytest.raises(DivisionByZero):
        field.zero() ** -1


def test_inverse_uses_field_inverse_of_norm() -> None:
    x = F103((3, 2))
    # norm = 9 + 4 = 13, 13 * 8 = 104 = 1 (mod 103)
    assert x.norm() == 13
    assert x.multiplicative_inverse() == F103((3 * 8, -2 * 8))


@pytest.mark.parametrize("field", FIELDS)
def test_mul_by_xi(field: Type[QuadraticExtensionField]) -> None:
    xi = field(field.XI)
    for x in random_elements(field, 20, seed=7):
        assert x.mul_by_xi() == x * xi


def test_mul_by_xi_closed_form() -> None:
    for x in random_elements(F103, 20, seed=8):
        a0, a1 = x
        assert x.mul_by_xi() == F103((a0 - a1, a0 + a1))


def test_mul_by_custom_xi() -> None:
    field = quadratic_extension("F103Xi", 103, -1, xi=(9, 1))
    for x in random_elements(field, 10, seed=9):
        assert x.mul_by_xi() == x * field((9, 1))


def test_construction_reduces() -> None:
    p = F103.PRIME
    assert F103((p + 5, 0)) == F103((5, 0))
    assert F103((-1, 0))[0] == p - 1
    assert F103((0, -1))[1] == p - 1
    assert F103((3 * p + 7, -p - 2)) == F103((7, p - 2))


@pytest.mark.parametrize("field", FIELDS)
def test_results_are_reduced(field: Type[QuadraticExtensionField]) -> None:
    x, y = random_elements(field, 2, seed=10)
    results = [
        x + y,
        x - y,
        y - x,
        x * y,
        x.square(),
        x.multiplicative_inverse(),
        x.mul_by_xi(),
        -x,
        x.conjugate(),
        x.scalar_mul(-7),
    ]
    for result in results:
        assert type(result) is field
        for coefficient in result:
            assert 0 <= coefficient < field.PRIME


def test_operations_do_not_mutate() -> None:
    x = F103((3, 2))
    y = F103((1, 4))
    x * y
    x + y
    x.square()
    x.multiplicative_inverse()
    assert x == F103((3, 2))
    assert y == F103((1, 4))
    with pytest.raises(TypeError):
        x[0] = 5  # type: ignore[index]


def test_coefficient_accessors() -> None:
    x = BNF2((3, 2))
    assert x.constant == 3
    assert x.linear == 2
    assert isinstance(x.constant, BNF)
    assert isinstance(x.linear, BNF)


def test_wrong_number_of_coefficients() -> None:
    with pytest.raises(ValueError):
        F103((1, 2, 3))
    with pytest.raises(ValueError):
        F103((1,))


def test_fields_do_not_mix() -> None:
    x = F103((3, 2))
    y = F103_BETA5((3, 2))
    assert x != y
    with pytest.raises(TypeError):
        x + y
    with pytest.raises(TypeError):
        x * y
    with pytest.raises(TypeError):
        x - y


def test_residue_beta_is_rejected() -> None:
    # 10^2 = 100 = -1 (mod 101)
    with pytest.raises(InvalidFieldParameters):
        quadratic_extension("F101", 101, -1)
    with pytest.raises(InvalidFieldParameters):
        quadratic_extension("F103", 103, 4)
    with pytest.raises(InvalidFieldParameters):
        quadratic_extension("F103", 103, 103)


def test_composite_modulus_is_rejected() -> None:
    with pytest.raises(InvalidFieldParameters):
        quadratic_extension("F100", 100, -1)
    with pytest.raises(InvalidFieldParameters):
        quadratic_extension("F2", 2, 1)


def test_pseudoprime_modulus_is_rejected() -> None:
    # 1387 = 19 * 73 passes the base-2 Fermat test
    assert pow(2, 1386, 1387) == 1
    with pytest.raises(InvalidFieldParameters):
        quadratic_extension("F1387", 1387, -16)


@pytest.mark.parametrize(
    "n,expected",
    [
        (0, False),
        (1, False),
        (2, True),
        (3, True),
        (4, False),
        (37, True),
        (41, True),
        (103, True),
        (341, False),
        (561, False),
        (1387, False),
        # strong pseudoprime to bases 2, 3, 5 and 7
        (3215031751, False),
        (2**61 - 1, True),
        (103 * (2**61 - 1), False),
        (ALT_BN128_PRIME, True),
    ],
)
def test_is_probable_prime(n: int, expected: bool) -> None:
    assert is_probable_prime(n) is expected


def test_legendre_symbol() -> None:
    assert legendre_symbol(-1, 103) == -1
    assert legendre_symbol(-1, 101) == 1
    assert legendre_symbol(0, 101) == 0
    assert legendre_symbol(2, 101) == -1
    assert is_quadratic_non_residue(5, 103)
    assert not is_quadratic_non_residue(4, 103)


@pytest.mark.parametrize("field", [F103, F103_BETA5])
def test_pow(field: Type[QuadraticExtensionField]) -> None:
    order = field.PRIME**2 - 1
    for x in random_elements(field, 10, seed=11):
        assert x**0 == field.one()
        assert x**1 == x
        assert x**3 == x * x * x
        if x.is_zero():
            continue
        assert x**order == field.one()
        assert x**-2 == (x * x).multiplicative_inverse()


@pytest.mark.parametrize("field", FIELDS)
def test_frobenius(field: Type[QuadraticExtensionField]) -> None:
    for x in random_elements(field, 5, seed=12):
        assert x.frobenius() == x**field.PRIME
        assert x.frobenius().frobenius() == x


@pytest.mark.parametrize("field", FIELDS)
def test_norm(field: Type[QuadraticExtensionField]) -> None:
    x, y = random_elements(field, 2, seed=13)
    assert field.from_int(x.norm()) == x * x.conjugate()
    assert (x * y).norm() == x.norm() * y.norm()
    assert isinstance(x.norm(), field.BASE_FIELD)


def test_division_and_scalar_mul() -> None:
    x, y = random_elements(F103, 2, seed=14)
    assert (x / y) * y == x
    assert x.scalar_mul(3) == x + x + x
    assert F103.from_int(7) == F103((7, 0))


def test_prime_field() -> None:
    assert BNF(-1) == BNF.PRIME - 1
    assert BNF(5) * BNF(5).multiplicative_inverse() == 1
    assert BNF(3) / BNF(3) == 1
    assert BNF(2) ** -1 == (BNF.PRIME + 1) // 2
    assert -BNF(1) == BNF.PRIME - 1
    assert isinstance(BNF(3) + 4, BNF)
    with pytest.raises(DivisionByZero):
        BNF.zero().multiplicative_inverse()


def test_prime_field_rejects_composite() -> None:
    with pytest.raises(InvalidFieldParameters):
        type("F100", (PrimeField,), {"__slots__": (), "PRIME": 100})
