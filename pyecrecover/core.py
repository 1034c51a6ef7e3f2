import hashlib
import json
import pyecrecover.ecdsa
import pyecrecover.error
import pyecrecover.secp256k1
import secrets
import typing


def hash(data: bytearray) -> bytearray:
    return bytearray(hashlib.sha256(data).digest())


class PriKey:
    def __init__(self, n: int) -> None:
        assert 0 < n < pyecrecover.secp256k1.N
        self.n = n

    def __repr__(self) -> str:
        return json.dumps(self.json())

    def __eq__(self, other: object) -> bool:
        assert isinstance(other, PriKey)
        return self.n == other.n

    def json(self) -> typing.Dict:
        return {
            'n': f'{self.n:064x}',
        }

    def pubkey(self) -> 'PubKey':
        pubkey = pyecrecover.secp256k1.G * pyecrecover.secp256k1.Fr(self.n)
        return PubKey(pubkey.x.x, pubkey.y.x)

    @classmethod
    def random(cls) -> 'PriKey':
        return PriKey(max(1, secrets.randbelow(pyecrecover.secp256k1.N)))

    def sign(self, data: bytearray) -> bytearray:
        # Signs a 32 bytes digest. The result is r || s || v.
        assert len(data) == 32
        m = pyecrecover.secp256k1.Fr(int.from_bytes(data))
        r, s, v = pyecrecover.ecdsa.sign(pyecrecover.secp256k1.Fr(self.n), m)
        return bytearray(r.x.to_bytes(32)) + bytearray(s.x.to_bytes(32)) + bytearray([v])


class PubKey:
    def __init__(self, x: int, y: int) -> None:
        # The public key must be a point of the curve other than the identity.
        if not 0 <= x < pyecrecover.secp256k1.P or not 0 <= y < pyecrecover.secp256k1.P:
            raise pyecrecover.error.RecoveredKeyInvalid('coordinate exceeds field modulus')
        pt = pyecrecover.secp256k1.Pt(pyecrecover.secp256k1.Fq(x), pyecrecover.secp256k1.Fq(y))
        if pt == pyecrecover.secp256k1.I or not pyecrecover.secp256k1.is_on_curve(pt):
            raise pyecrecover.error.RecoveredKeyInvalid('public key is not a point of the curve')
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return json.dumps(self.json())

    def __eq__(self, other: object) -> bool:
        assert isinstance(other, PubKey)
        return all([
            self.x == other.x,
            self.y == other.y,
        ])

    def hex(self) -> str:
        # Both coordinates big endian, each zero padded to 32 bytes.
        return f'{self.x:064x}{self.y:064x}'

    @classmethod
    def hex_decode(cls, data: str) -> 'PubKey':
        if len(data) != 128:
            raise pyecrecover.error.DecodeError(f'public key should be 128 hex digits, not {len(data)}')
        try:
            b = bytearray.fromhex(data)
        except ValueError as e:
            raise pyecrecover.error.DecodeError(str(e)) from e
        return PubKey(int.from_bytes(b[:32]), int.from_bytes(b[32:]))

    def json(self) -> typing.Dict:
        return {
            'x': f'{self.x:064x}',
            'y': f'{self.y:064x}'
        }

    def pt(self) -> pyecrecover.secp256k1.Pt:
        return pyecrecover.secp256k1.Pt(pyecrecover.secp256k1.Fq(self.x), pyecrecover.secp256k1.Fq(self.y))

    @classmethod
    def pt_decode(cls, data: pyecrecover.secp256k1.Pt) -> 'PubKey':
        return PubKey(data.x.x, data.y.x)

    @classmethod
    def recover(cls, data: bytearray, sig: bytearray) -> 'PubKey':
        # Recovers the signer of a 32 bytes digest from a 65 bytes signature made by PriKey.sign.
        assert len(data) == 32
        assert len(sig) == 65
        e = int.from_bytes(data)
        r = int.from_bytes(sig[0x00:0x20])
        s = int.from_bytes(sig[0x20:0x40])
        v = sig[0x40]
        return recover_public_key(e, r, s, v)

    def sec(self) -> bytearray:
        # The Standards of Efficient Cryptography (SEC) encoding is used to serialize ECDSA public keys. x may be
        # smaller than 32 bytes in which case it must be padded with zeros to 32 bytes.
        r = bytearray()
        if self.y & 1 == 0:
            r.append(0x02)
        else:
            r.append(0x03)
        r.extend(self.x.to_bytes(32))
        return r

    @classmethod
    def sec_decode(cls, data: bytearray) -> 'PubKey':
        p = data[0]
        assert p in [0x02, 0x03, 0x04]
        x = int.from_bytes(data[1:33])
        if p == 0x04:
            assert len(data) == 65
            y = int.from_bytes(data[33:65])
        else:
            assert len(data) == 33
            y_y = x * x * x + pyecrecover.secp256k1.A.x * x + pyecrecover.secp256k1.B.x
            y = pyecrecover.secp256k1.sqrt_mod_p(y_y)
            if y & 1 != p - 2:
                y = -y % pyecrecover.secp256k1.P
        return PubKey(x, y)

    def verify(self, data: bytearray, sig: bytearray) -> bool:
        assert len(data) == 32
        assert len(sig) in [64, 65]
        e = int.from_bytes(data)
        r = int.from_bytes(sig[0x00:0x20])
        s = int.from_bytes(sig[0x20:0x40])
        return pyecrecover.ecdsa.verify(self.pt(), e, r, s)


def recover_public_key(e: int, r: int, s: int, v: int) -> PubKey:
    # Recovers the public key that made signature (r, s) over message hash e. Any failure raises a
    # pyecrecover.error.RecoveryError telling which stage rejected the input.
    return PubKey.pt_decode(pyecrecover.ecdsa.recover(e, r, s, v))
