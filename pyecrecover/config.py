import pyecrecover.objectdict

# Curve descriptions. Every value here is a process-wide constant; the curve modules read them once at import time.

# https://www.secg.org/sec2-v2.pdf
# 2.4.1 Recommended Parameters secp256k1
secp256k1 = pyecrecover.objectdict.ObjectDict({
    'name': 'secp256k1',
    # Field modulus. Note p = 3 mod 4, which the square root in pyecrecover.secp256k1 depends on.
    'p': 0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f,
    # Order of the subgroup generated by g.
    'n': 0xfffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141,
    'h': 1,
    'a': 0,
    'b': 7,
    'g': pyecrecover.objectdict.ObjectDict({
        'x': 0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798,
        'y': 0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8,
    }),
    # Width of the message hash, sha256.
    'hash_bits': 256,
})

current = secp256k1
