"""
Finite Fields
^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Prime fields `F_p` and their quadratic extensions `F_p[u]/(u^2 - BETA)`.

The modulus and the non-residue `BETA` are bound to the element *type* by
subclassing, so values belonging to differently configured fields can never
be combined by accident.
"""

# flake8: noqa: D102, D105

from typing import Any, Iterable, Self, Tuple, Type

from typing_extensions import Protocol

from .exceptions import DivisionByZero, InvalidFieldParameters
from .utils.ensure import ensure


class Field(Protocol):
    """
    A type protocol for defining fields.
    """

    __slots__ = ()

    @classmethod
    def zero(cls) -> Self:
        """Returns the additive identity (0) of the field."""
        ...

    @classmethod
    def from_int(cls, n: int) -> Self:
        """Constructs a field element from an integer."""
        ...

    def __add__(self, right: Self) -> Self:
        """Field addition (self + right)."""
        ...

    def __sub__(self, right: Self) -> Self:
        """Field subtraction (self - right)."""
        ...

    def __mul__(self, right: Self) -> Self:
        """Field multiplication (self * right)."""
        ...

    def __pow__(self, exponent: int) -> Self:
        """Field exponentiation (self ** exponent)."""
        ...

    def __neg__(self) -> Self:
        """Additive inverse (-self)."""
        ...

    def __truediv__(self, right: Self) -> Self:
        """Field division (self / right)."""
        ...

    def multiplicative_inverse(self) -> Self:
        """Returns the multiplicative inverse (self ** -1)."""
        ...


_MILLER_RABIN_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def is_probable_prime(n: int) -> bool:
    """
    Miller-Rabin test over the first twelve primes. Exact for
    `n < 3.3 * 10**24`, and a strong probable-prime test beyond that.
    """
    if n < 2:
        return False
    for base in _MILLER_RABIN_BASES:
        if n % base == 0:
            return n == base

    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for base in _MILLER_RABIN_BASES:
        x = pow(base, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def legendre_symbol(n: int, prime: int) -> int:
    """
    Euler's criterion: `n ** ((prime - 1) / 2)` modulo the odd prime
    `prime` is 1 for non-zero squares, -1 for non-residues and 0 for
    multiples of `prime`.
    """
    symbol = pow(n % prime, (prime - 1) // 2, prime)
    return -1 if symbol == prime - 1 else symbol


def is_quadratic_non_residue(n: int, prime: int) -> bool:
    """Returns `True` if `n` has no square root modulo `prime`."""
    return legendre_symbol(n, prime) == -1


class PrimeField(int, Field):
    """
    Superclass for integers modulo a prime. Not intended to be used
    directly, but rather to be subclassed.
    """

    __slots__ = ()
    PRIME: int

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "PRIME" not in cls.__dict__:
            return
        ensure(
            is_probable_prime(cls.PRIME) and cls.PRIME > 2,
            InvalidFieldParameters(f"{cls.PRIME} is not an odd prime"),
        )

    @classmethod
    def zero(cls) -> Self:
        """Returns the additive identity (0) of the field."""
        return cls.__new__(cls, 0)

    @classmethod
    def from_int(cls, n: int) -> Self:
        """Constructs a field element from an integer."""
        return cls(n)

    def __new__(cls, value: int) -> Self:
        return int.__new__(cls, value % cls.PRIME)

    def __radd__(self, left: Self) -> Self:  # type: ignore[override]
        return self.__add__(left)

    def __add__(self, right: Self) -> Self:  # type: ignore[override]
        if not isinstance(right, int):
            return NotImplemented
        return self.__new__(type(self), int.__add__(self, right))

    def __sub__(self, right: Self) -> Self:  # type: ignore[override]
        if not isinstance(right, int):
            return NotImplemented
        return self.__new__(type(self), int.__sub__(self, right))

    def __rsub__(self, left: Self) -> Self:  # type: ignore[override]
        if not isinstance(left, int):
            return NotImplemented
        return self.__new__(type(self), int.__rsub__(self, left))

    def __mul__(self, right: Self) -> Self:  # type: ignore[override]
        if not isinstance(right, int):
            return NotImplemented
        return self.__new__(type(self), int.__mul__(self, right))

    def __rmul__(self, left: Self) -> Self:  # type: ignore[override]
        return self.__mul__(left)

    # Disabled operations
    __floordiv__ = None  # type: ignore
    __rfloordiv__ = None  # type: ignore
    __divmod__ = None  # type: ignore
    __rdivmod__ = None  # type: ignore
    __rpow__ = None  # type: ignore

    def __pow__(self, exponent: int) -> Self:  # type: ignore[override]
        """Modular exponentiation (self ** exponent % PRIME)."""
        if exponent < 0:
            return self.multiplicative_inverse() ** (-exponent)
        return self.__new__(
            type(self), int.__pow__(int(self), exponent, self.PRIME)
        )

    def __neg__(self) -> Self:
        """Additive inverse (-self)."""
        return self.__new__(type(self), int.__neg__(self))

    def __truediv__(self, right: Self) -> Self:  # type: ignore[override]
        """Field division (self / right)."""
        return self * type(self)(right).multiplicative_inverse()

    def multiplicative_inverse(self) -> Self:
        """Returns the multiplicative inverse (self ** -1)."""
        ensure(
            self != 0,
            lambda: DivisionByZero(
                f"cannot invert zero in {type(self).__name__}"
            ),
        )
        return self.__new__(type(self), pow(int(self), -1, self.PRIME))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class QuadraticExtensionField(tuple, Field):
    """
    Superclass for quadratic extensions `F_p[u]/(u^2 - BETA)`. Not intended
    to be used directly, but rather to be subclassed.

    An element `a0 + a1 * u` is the tuple `(a0, a1)`: index 0 holds the
    constant coefficient and index 1 the linear one. Both are always reduced
    into `[0, PRIME)`.

    Subclasses set `BASE_FIELD` (the `PrimeField` the coefficients live in),
    `BETA` (a quadratic non-residue of the base field) and optionally `XI`,
    the element `(x0, x1)` used by `mul_by_xi()` (`u + 1` by default).
    `PRIME` is copied from the base field.
    """

    __slots__ = ()

    BASE_FIELD: Type[PrimeField]
    PRIME: int
    BETA: int
    XI: Tuple[int, int] = (1, 1)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "BASE_FIELD" not in cls.__dict__ and "BETA" not in cls.__dict__:
            return
        ensure(
            isinstance(getattr(cls, "BASE_FIELD", None), type)
            and issubclass(cls.BASE_FIELD, PrimeField)
            and hasattr(cls.BASE_FIELD, "PRIME"),
            InvalidFieldParameters(
                f"{cls.__name__}.BASE_FIELD must be a configured PrimeField"
            ),
        )
        ensure(
            hasattr(cls, "BETA"),
            InvalidFieldParameters(f"{cls.__name__}.BETA is not set"),
        )
        ensure(
            is_quadratic_non_residue(cls.BETA, cls.BASE_FIELD.PRIME),
            InvalidFieldParameters(
                f"{cls.BETA} is a square modulo {cls.BASE_FIELD.PRIME}"
            ),
        )
        cls.PRIME = cls.BASE_FIELD.PRIME

    @classmethod
    def zero(cls) -> Self:
        """Returns the additive identity (0) of the field."""
        return cls.__new__(cls, (0, 0))

    @classmethod
    def one(cls) -> Self:
        """Returns the multiplicative identity (1) of the field."""
        return cls.__new__(cls, (1, 0))

    @classmethod
    def from_int(cls, n: int) -> Self:
        """Constructs a field element from an integer."""
        return cls.__new__(cls, (n, 0))

    def __new__(cls, iterable: Iterable[int]) -> Self:
        self = tuple.__new__(cls, (int(x) % cls.PRIME for x in iterable))
        if len(self) != 2:
            raise ValueError(
                f"{cls.__name__} takes exactly two coefficients, "
                f"got {len(self)}"
            )
        return self

    @property
    def constant(self) -> PrimeField:
        """The coefficient `a0` of `a0 + a1 * u`."""
        return self.BASE_FIELD(self[0])

    @property
    def linear(self) -> PrimeField:
        """The coefficient `a1` of `a0 + a1 * u`."""
        return self.BASE_FIELD(self[1])

    def _is_same_field(self, other: object) -> bool:
        return type(other) is type(self)

    def __eq__(self, other: object) -> bool:
        if not self._is_same_field(other):
            return False
        return tuple.__eq__(self, other)  # type: ignore[arg-type]

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = tuple.__hash__

    def __add__(self, right: Self) -> Self:  # type: ignore[override]
        """Field addition (self + right)."""
        if not self._is_same_field(right):
            return NotImplemented

        return self.__new__(
            type(self),
            (x + y for (x, y) in zip(self, right)),
        )

    def __radd__(self, left: Self) -> Self:
        """Reverse addition (left + self)."""
        return self.__add__(left)

    def __sub__(self, right: Self) -> Self:
        """Field subtraction (self - right)."""
        if not self._is_same_field(right):
            return NotImplemented

        return self.__new__(
            type(self),
            (x - y for (x, y) in zip(self, right)),
        )

    def __rsub__(self, left: Self) -> Self:
        """Reverse subtraction (left - self)."""
        if not self._is_same_field(left):
            return NotImplemented

        return self.__new__(
            type(self),
            (x - y for (x, y) in zip(left, self)),
        )

    def __mul__(self, right: Self) -> Self:  # type: ignore[override]
        """
        Field multiplication (self * right).

        Karatsuba: with `v0 = a0 * b0` and `v1 = a1 * b1` the product is
        `(v0 + BETA * v1) + ((a0 + a1) * (b0 + b1) - v0 - v1) * u`, three
        base field multiplications instead of four.
        """
        if not self._is_same_field(right):
            return NotImplemented

        a0, a1 = self
        b0, b1 = right
        v0 = a0 * b0
        v1 = a1 * b1
        c0 = v0 + self.BETA * v1
        c1 = (a0 + a1) * (b0 + b1) - v0 - v1
        return self.__new__(type(self), (c0, c1))

    def __rmul__(self, left: Self) -> Self:  # type: ignore[override]
        """Reverse multiplication (left * self)."""
        return self.__mul__(left)

    def square(self) -> Self:
        """
        Complex squaring. With `v0 = a0 * a1`:

            c0 = (a0 + a1) * (a0 + BETA * a1) - v0 - BETA * v0
            c1 = 2 * v0

        Always equal to `self * self`.
        """
        a0, a1 = self
        beta = self.BETA
        v0 = a0 * a1
        c0 = (a0 + a1) * (a0 + beta * a1) - v0 - beta * v0
        c1 = 2 * v0
        return self.__new__(type(self), (c0, c1))

    def norm(self) -> PrimeField:
        """
        The field norm `a0^2 - BETA * a1^2`, an element of the base field.
        Zero only for the zero element, since `BETA` is a non-residue.
        """
        a0, a1 = self
        return self.BASE_FIELD(a0 * a0 - self.BETA * (a1 * a1))

    def multiplicative_inverse(self) -> Self:
        """
        Calculate the multiplicative inverse through the norm:
        `(a0 + a1 * u)^-1 = (a0 - a1 * u) / (a0^2 - BETA * a1^2)`.
        """
        ensure(
            not self.is_zero(),
            lambda: DivisionByZero(
                f"cannot invert zero in {type(self).__name__}"
            ),
        )
        a0, a1 = self
        m = self.norm().multiplicative_inverse()
        return self.__new__(type(self), (a0 * m, -a1 * m))

    def __truediv__(self, right: Self) -> Self:
        """Field division (self / right)."""
        if not self._is_same_field(right):
            return NotImplemented
        return self * right.multiplicative_inverse()

    def __neg__(self) -> Self:
        """Additive inverse (-self)."""
        return self.__new__(type(self), (-a for a in self))

    def __pow__(self, exponent: int) -> Self:
        """Field exponentiation (self ** exponent)."""
        if exponent < 0:
            self = self.multiplicative_inverse()
            exponent = -exponent

        res = self.one()
        s = self
        while exponent != 0:
            if exponent % 2 == 1:
                res *= s
            s = s.square()
            exponent //= 2
        return res

    def mul_by_xi(self) -> Self:
        """
        Multiply by the twist element `XI = x0 + x1 * u`. For the default
        `u + 1` this is `(a0 + BETA * a1) + (a0 + a1) * u`.
        """
        x0, x1 = self.XI
        a0, a1 = self
        c0 = a0 * x0 + self.BETA * a1 * x1
        c1 = a0 * x1 + a1 * x0
        return self.__new__(type(self), (c0, c1))

    def scalar_mul(self, x: int) -> Self:
        """
        Multiply a field element by an integer.
        Faster than using `from_int()` and field multiplication.
        """
        return self.__new__(type(self), (x * n for n in self))

    def conjugate(self) -> Self:
        """Returns `a0 - a1 * u`."""
        a0, a1 = self
        return self.__new__(type(self), (a0, -a1))

    def frobenius(self) -> Self:
        """
        Returns `self ** p` (Frobenius endomorphism). `u ** p` is `-u` when
        `BETA` is a non-residue, so this is the conjugate.
        """
        return self.conjugate()

    def is_zero(self) -> bool:
        """Returns `True` for the additive identity."""
        return self[0] == 0 and self[1] == 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(({self[0]}, {self[1]}))"


def quadratic_extension(
    name: str, prime: int, beta: int, xi: Tuple[int, int] = (1, 1)
) -> Type[QuadraticExtensionField]:
    """
    Build a quadratic extension field type at runtime, together with the
    prime field its coefficients live in.

    Parameters
    ----------
    name :
        Class name of the extension type. The base field is named
        `f"{name}Base"`.
    prime :
        Modulus of the base field.
    beta :
        Quadratic non-residue adjoined as `u^2`.
    xi :
        Twist element `(x0, x1)` used by `mul_by_xi()`.

    Returns
    -------
    field : `Type[QuadraticExtensionField]`
        The new field type.

    Raises
    ------
    InvalidFieldParameters
        `prime` is not an odd prime or `beta` is a square modulo `prime`.
    """
    base = type(
        f"{name}Base", (PrimeField,), {"__slots__": (), "PRIME": prime}
    )
    return type(
        name,
        (QuadraticExtensionField,),
        {
            "__slots__": (),
            "BASE_FIELD": base,
            "BETA": beta,
            "XI": (xi[0], xi[1]),
        },
    )
