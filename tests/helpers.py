import random
from typing import List, Tuple, Type, TypeVar

from bnfield.finite_field import QuadraticExtensionField, quadratic_extension

F = TypeVar("F", bound=QuadraticExtensionField)

# 103 is 3 mod 4, so -1 is a non-residue.
F103 = quadratic_extension("F103", 103, -1)

# 5 is a non-residue modulo 103, exercises the general BETA paths.
F103_BETA5 = quadratic_extension("F103Beta5", 103, 5)


def random_elements(field: Type[F], count: int, seed: int = 0) -> List[F]:
    rng = random.Random(seed)
    return [
        field((rng.randrange(field.PRIME), rng.randrange(field.PRIME)))
        for _ in range(count)
    ]


def naive_mul(x: F, y: F) -> F:
    a0, a1 = x
    b0, b1 = y
    return type(x)((a0 * b0 + x.BETA * a1 * b1, a1 * b0 + a0 * b1))


def karatsuba_mul(
    x: Tuple[int, int], y: Tuple[int, int], beta: int, prime: int
) -> Tuple[int, int]:
    # Three-multiplication product over Z_prime[u]/(u^2 - beta), whether or
    # not that ring is a field.
    a0, a1 = map(int, x)
    b0, b1 = map(int, y)
    v0 = a0 * b0
    v1 = a1 * b1
    c0 = v0 + beta * v1
    c1 = (a0 + a1) * (b0 + b1) - v0 - v1
    return c0 % prime, c1 % prime
