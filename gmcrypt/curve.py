"""Short Weierstrass curves over prime fields, SM2 and NIST P-256, and key types."""

from __future__ import annotations

from dataclasses import dataclass, field

Point = tuple[int, int]

_UNCOMPRESSED = 0x04


def _scalar(k: bytes | int) -> int:
    if isinstance(k, (bytes, bytearray, memoryview)):
        return int.from_bytes(bytes(k), "big")
    if k < 0:
        raise ValueError("scalar must not be negative")
    return k


@dataclass(frozen=True)
class Curve:
    """Curve y^2 = x^3 + a*x + b over GF(p); (0, 0) stands for the point at infinity."""

    name: str
    p: int
    a: int
    b: int
    n: int
    gx: int
    gy: int
    bit_size: int = 256

    @property
    def byte_len(self) -> int:
        return (self.bit_size + 7) // 8

    def is_on_curve(self, x: int, y: int) -> bool:
        if not (0 <= x < self.p and 0 <= y < self.p):
            return False
        return (y * y - (x * x * x + self.a * x + self.b)) % self.p == 0

    def add(self, x1: int, y1: int, x2: int, y2: int) -> Point:
        if x1 == 0 and y1 == 0:
            return x2, y2
        if x2 == 0 and y2 == 0:
            return x1, y1
        p = self.p
        if (x1 - x2) % p == 0:
            if (y1 + y2) % p == 0:
                return 0, 0
            return self.double(x1, y1)
        lam = (y2 - y1) * pow(x2 - x1, -1, p) % p
        x3 = (lam * lam - x1 - x2) % p
        y3 = (lam * (x1 - x3) - y1) % p
        return x3, y3

    def double(self, x: int, y: int) -> Point:
        p = self.p
        if (x == 0 and y == 0) or y % p == 0:
            return 0, 0
        lam = (3 * x * x + self.a) * pow(2 * y, -1, p) % p
        x3 = (lam * lam - 2 * x) % p
        y3 = (lam * (x - x3) - y) % p
        return x3, y3

    def scalar_mult(self, x: int, y: int, k: bytes | int) -> Point:
        """Return k*(x, y); ``k`` is an int or a big-endian byte string."""
        scalar = _scalar(k)
        result: Point = (0, 0)
        if scalar == 0:
            return result
        for bit in bin(scalar)[2:]:
            result = self.double(*result)
            if bit == "1":
                result = self.add(*result, x, y)
        return result

    def scalar_base_mult(self, k: bytes | int) -> Point:
        return self.scalar_mult(self.gx, self.gy, k)

    def marshal(self, x: int, y: int) -> bytes:
        """Encode a point in the uncompressed form of ANSI X9.62 section 4.3.6."""
        size = self.byte_len
        return bytes([_UNCOMPRESSED]) + x.to_bytes(size, "big") + y.to_bytes(size, "big")

    def unmarshal(self, data: bytes) -> Point:
        """Decode an uncompressed point, checking that it lies on the curve."""
        size = self.byte_len
        data = bytes(data)
        if len(data) != 1 + 2 * size:
            raise ValueError("invalid point encoding length")
        if data[0] != _UNCOMPRESSED:
            raise ValueError("point is not in uncompressed form")
        x = int.from_bytes(data[1 : 1 + size], "big")
        y = int.from_bytes(data[1 + size :], "big")
        if not self.is_on_curve(x, y):
            raise ValueError("point is not on the curve")
        return x, y


SM2_P256 = Curve(
    name="SM2-P-256",
    p=0xFFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF00000000FFFFFFFFFFFFFFFF,
    a=0xFFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF00000000FFFFFFFFFFFFFFFC,
    b=0x28E9FA9E9D9F5E344D5A9E4BCF6509A7F39789F515AB8F92DDBCBD414D940E93,
    n=0xFFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFF7203DF6B21C6052B53BBF40939D54123,
    gx=0x32C4AE2C1F1981195F9904466A39C9948FE30BBFF2660BE1715A4589334C74C7,
    gy=0xBC3736A2F4F6779C59BDCEE36B692153D0A9877CC62A474002DF32E52139F0A0,
)

NIST_P256 = Curve(
    name="P-256",
    p=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF,
    a=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFC,
    b=0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
    n=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    gx=0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
    gy=0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
)


@dataclass(frozen=True)
class PublicKey:
    """A public key: a point on a curve."""

    curve: Curve
    x: int
    y: int


@dataclass(frozen=True)
class PrivateKey:
    """A private scalar ``d`` with its public point (x, y)."""

    curve: Curve
    d: int = field(repr=False)
    x: int
    y: int

    @property
    def public_key(self) -> PublicKey:
        return PublicKey(self.curve, self.x, self.y)


def generate_key_by_seed(curve: Curve, seed: bytes) -> PrivateKey:
    """Derive a key pair deterministically: d = seed mod (n - 1) + 1."""
    d = int.from_bytes(bytes(seed), "big") % (curve.n - 1) + 1
    x, y = curve.scalar_base_mult(d)
    return PrivateKey(curve=curve, d=d, x=x, y=y)