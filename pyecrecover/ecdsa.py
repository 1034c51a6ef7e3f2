import itertools
import pyecrecover.config
import pyecrecover.error
import pyecrecover.log
import pyecrecover.secp256k1
import secrets
import typing

log = pyecrecover.log.get_logger(__name__)

# Width of the message hash in bits. Hashes may exceed n but never this.
hash_bits = pyecrecover.config.current.hash_bits


def recovery_id(R: pyecrecover.secp256k1.Pt) -> int:
    # Bit 0 is the parity of R.y, bit 1 tells that R.x was reduced modulo n to get r.
    v = 0
    if R.y.x & 1 == 1:
        v |= 1
    if R.x.x >= pyecrecover.secp256k1.N:
        v |= 2
    return v


def sign(prikey: pyecrecover.secp256k1.Fr, m: pyecrecover.secp256k1.Fr) -> typing.Tuple[pyecrecover.secp256k1.Fr, pyecrecover.secp256k1.Fr, int]:
    # https://www.secg.org/sec1-v2.pdf
    # 4.1.3 Signing Operation
    for _ in itertools.repeat(0):
        k = pyecrecover.secp256k1.Fr(max(1, secrets.randbelow(pyecrecover.secp256k1.N)))
        R = pyecrecover.secp256k1.G * k
        r = pyecrecover.secp256k1.Fr(R.x.x)
        if r.x == 0:
            continue
        s = (m + prikey * r) / k
        if s.x == 0:
            continue
        return r, s, recovery_id(R)


def sign_nonce(prikey: pyecrecover.secp256k1.Fr, m: pyecrecover.secp256k1.Fr, k: pyecrecover.secp256k1.Fr) -> typing.Tuple[pyecrecover.secp256k1.Fr, pyecrecover.secp256k1.Fr, int]:
    # Signing with a caller chosen nonce. Only meant for reproducing known signatures, never reuse a nonce.
    assert k.x != 0
    R = pyecrecover.secp256k1.G * k
    r = pyecrecover.secp256k1.Fr(R.x.x)
    s = (m + prikey * r) / k
    assert r.x != 0
    assert s.x != 0
    return r, s, recovery_id(R)


def verify_strict(pubkey: pyecrecover.secp256k1.Pt, e: int, r: int, s: int) -> None:
    # https://www.secg.org/sec1-v2.pdf
    # 4.1.4 Verifying Operation
    w = pyecrecover.secp256k1.inverse_mod(s, pyecrecover.secp256k1.N)
    u1 = e * w % pyecrecover.secp256k1.N
    u2 = r * w % pyecrecover.secp256k1.N
    x1 = pyecrecover.secp256k1.G * u1 + pubkey * u2
    if not pyecrecover.secp256k1.is_on_curve(x1):
        raise pyecrecover.error.VerificationPointInvalid('u1 * G + u2 * Q is not on the curve')
    if x1 == pyecrecover.secp256k1.I:
        raise pyecrecover.error.SignatureDoesNotVerify('u1 * G + u2 * Q is the identity')
    if x1.x.x % pyecrecover.secp256k1.N != r:
        raise pyecrecover.error.SignatureDoesNotVerify('public key fails to verify signature')


def verify(pubkey: pyecrecover.secp256k1.Pt, e: int, r: int, s: int) -> bool:
    try:
        verify_strict(pubkey, e, r, s)
    except pyecrecover.error.RecoveryError:
        return False
    return True


def recover(e: int, r: int, s: int, v: int) -> pyecrecover.secp256k1.Pt:
    # https://www.secg.org/sec1-v2.pdf
    # 4.1.6 Public Key Recovery Operation
    # Returns Q = r^-1 (s * R - e * G), checked against the signature before it is handed out.
    if v not in [0, 1, 2, 3]:
        raise pyecrecover.error.InvalidRecoveryId(f'recovery id is {v}, but should be 0 <= v <= 3')
    if not 0 <= r < pyecrecover.secp256k1.N:
        raise pyecrecover.error.InvalidSignatureRange('r exceeds group size')
    if not 0 <= s < pyecrecover.secp256k1.N:
        raise pyecrecover.error.InvalidSignatureRange('s exceeds group size')
    if e < 0 or e.bit_length() > hash_bits:
        raise pyecrecover.error.InvalidMessageHash('message hash value out of range')

    R = None
    for i in range(pyecrecover.secp256k1.H + 1):
        # x may lie between n and p, in which case r is x reduced modulo n.
        x = r + i * pyecrecover.secp256k1.N
        if x >= pyecrecover.secp256k1.P:
            # x only grows with i.
            raise pyecrecover.error.RecoveredXExceedsField('recovered R.x exceeds field modulus')
        x = pyecrecover.secp256k1.Fq(x)
        y = (x * x * x + pyecrecover.secp256k1.A * x + pyecrecover.secp256k1.B).sqrt()
        if v & 1 != y.x & 1:
            y = -y
        candidate = pyecrecover.secp256k1.Pt(x, y)
        if pyecrecover.secp256k1.is_on_curve(candidate):
            log.debug('candidate R found at cofactor offset %d', i)
            R = candidate
            break
        log.debug('candidate R at cofactor offset %d is not on the curve', i)
    if R is None:
        raise pyecrecover.error.PointRecoveryFailed('computed point is not on curve')

    sR = R * s
    eG = pyecrecover.secp256k1.G * (e % pyecrecover.secp256k1.N)
    Q = (sR - eG) * pyecrecover.secp256k1.inverse_mod(r, pyecrecover.secp256k1.N)
    if Q == pyecrecover.secp256k1.I:
        raise pyecrecover.error.RecoveredKeyInvalid('recovered key is the identity')
    if not pyecrecover.secp256k1.is_on_curve(Q):
        raise pyecrecover.error.RecoveredKeyInvalid('recovered key is not on the curve')
    if Q * pyecrecover.secp256k1.N != pyecrecover.secp256k1.I:
        raise pyecrecover.error.RecoveredKeyInvalid('recovered key is not in the subgroup generated by g')

    verify_strict(Q, e, r, s)
    log.debug('recovered Q = (0x%064x, 0x%064x)', Q.x.x, Q.y.x)
    return Q
