import math
import pyecrecover.config
import pyecrecover.error
import typing

# Curve parameters, taken once from the active curve description.
P = pyecrecover.config.current.p
N = pyecrecover.config.current.n
H = pyecrecover.config.current.h

# The square root below is only valid for such a field.
assert P % 4 == 3


def powmod(base: int, exponent: int, modulus: int) -> int:
    assert exponent >= 0
    assert modulus > 0
    return pow(base, exponent, modulus)


def inverse_mod(value: int, modulus: int) -> int:
    # Raises NoInverse when value and modulus are not coprime, zero included.
    if math.gcd(value, modulus) != 1:
        raise pyecrecover.error.NoInverse(f'{value:#x} has no inverse modulo {modulus:#x}')
    return pow(value, -1, modulus)


def sqrt_mod_p(value: int) -> int:
    # Handbook of Applied Cryptography, 3.36: for p = 3 mod 4 a square root of value is value^((p+1)/4). The result
    # is meaningless when value is not a quadratic residue, the caller must check it squares back.
    return powmod(value, (P + 1) // 4, P)


class Fp:
    # Fp is an element of a prime field. Subclasses bind the modulus.
    p = 0

    def __init__(self, x: int) -> None:
        self.x = x % self.p

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(0x{self.x:064x})'

    def __eq__(self, other: object) -> bool:
        assert isinstance(other, self.__class__)
        return self.x == other.x

    def __add__(self, other: typing.Self) -> typing.Self:
        assert isinstance(other, self.__class__)
        return self.__class__(self.x + other.x)

    def __sub__(self, other: typing.Self) -> typing.Self:
        assert isinstance(other, self.__class__)
        return self.__class__(self.x - other.x)

    def __mul__(self, other: typing.Self) -> typing.Self:
        assert isinstance(other, self.__class__)
        return self.__class__(self.x * other.x)

    def __truediv__(self, other: typing.Self) -> typing.Self:
        assert isinstance(other, self.__class__)
        return self * other ** -1

    def __pow__(self, other: int) -> typing.Self:
        if other < 0:
            return self.__class__(powmod(inverse_mod(self.x, self.p), -other, self.p))
        return self.__class__(powmod(self.x, other, self.p))

    def __neg__(self) -> typing.Self:
        return self.__class__(self.p - self.x)

    @classmethod
    def nil(cls) -> typing.Self:
        return cls(0)

    @classmethod
    def one(cls) -> typing.Self:
        return cls(1)


class Fq(Fp):
    # Fq is the field the curve coordinates live in.
    p = P

    def sqrt(self) -> typing.Self:
        return Fq(sqrt_mod_p(self.x))


class Fr(Fp):
    # Fr is the scalar field, integers modulo the group order.
    p = N


A = Fq(pyecrecover.config.current.a)
B = Fq(pyecrecover.config.current.b)


class Pt:
    # Pt is an affine point. The identity is the distinguished value I below, (0, 0) is never on the curve since b != 0.

    def __init__(self, x: Fq, y: Fq) -> None:
        assert isinstance(x, Fq)
        assert isinstance(y, Fq)
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return f'Pt({self.x}, {self.y})'

    def __eq__(self, other: object) -> bool:
        assert isinstance(other, Pt)
        return all([
            self.x == other.x,
            self.y == other.y,
        ])

    def __add__(self, other: typing.Self) -> typing.Self:
        # https://www.cs.miami.edu/home/burt/learning/Csc609.142/ecdsa-cert.pdf
        # Don Johnson, Alfred Menezes and Scott Vanstone, The Elliptic Curve Digital Signature Algorithm (ECDSA)
        # 4.1 Elliptic Curves Over Fp
        assert isinstance(other, Pt)
        if self == I:
            return other
        if other == I:
            return self
        if self.x == other.x and self.y == -other.y:
            return I
        x1, x2 = self.x, other.x
        y1, y2 = self.y, other.y
        if x1 == x2:
            sk = (x1 * x1 * Fq(3) + A) / (y1 * Fq(2))
        else:
            sk = (y2 - y1) / (x2 - x1)
        x3 = sk * sk - x1 - x2
        y3 = sk * (x1 - x3) - y1
        return Pt(x3, y3)

    def __sub__(self, other: typing.Self) -> typing.Self:
        return self + (-other)

    def __mul__(self, k: Fr | int) -> typing.Self:
        # Double and add. An Fr is already reduced modulo n, a plain int is used as given.
        n = k.x if isinstance(k, Fr) else k
        assert n >= 0
        result = I
        addend = self
        while n:
            if n & 1:
                result = result + addend
            addend = addend + addend
            n >>= 1
        return result

    def __truediv__(self, k: Fr) -> typing.Self:
        assert isinstance(k, Fr)
        return self * k ** -1

    def __neg__(self) -> typing.Self:
        if self == I:
            return I
        return Pt(self.x, -self.y)


I = Pt(Fq(0), Fq(0))
G = Pt(Fq(pyecrecover.config.current.g.x), Fq(pyecrecover.config.current.g.y))


def is_on_curve(pt: Pt) -> bool:
    if pt == I:
        return True
    return pt.y * pt.y == pt.x * pt.x * pt.x + A * pt.x + B


def add(p1: Pt, p2: Pt) -> Pt:
    return p1 + p2


def subtract(p1: Pt, p2: Pt) -> Pt:
    return p1 - p2


def scalar_multiply(k: Fr | int, pt: Pt) -> Pt:
    return pt * k
