# Failures raised while recovering a public key. All of them are deterministic: the same input always fails the
# same way, so none is worth retrying.


class RecoveryError(Exception):
    pass


class InvalidSignatureRange(RecoveryError):
    # r or s is outside [0, n).
    pass


class InvalidMessageHash(RecoveryError):
    # e is negative or wider than the hash.
    pass


class InvalidRecoveryId(RecoveryError):
    pass


class RecoveredXExceedsField(RecoveryError):
    # r + i * n reached the field modulus.
    pass


class PointRecoveryFailed(RecoveryError):
    # None of the x candidates lies on the curve.
    pass


class RecoveredKeyInvalid(RecoveryError):
    # Q is the identity, has the wrong order or is off the curve.
    pass


class VerificationPointInvalid(RecoveryError):
    pass


class SignatureDoesNotVerify(RecoveryError):
    pass


class NoInverse(RecoveryError, ZeroDivisionError):
    pass


class DecodeError(RecoveryError, ValueError):
    pass
