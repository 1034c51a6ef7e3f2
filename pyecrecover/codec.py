import base64
import binascii
import pyecrecover.core
import pyecrecover.error
import pyecrecover.log

# Text forms of the recovery inputs and output. Every integer crosses this boundary as exactly 32 bytes.

log = pyecrecover.log.get_logger(__name__)

size = 32


def decode(data: str, encoding: str = 'hex') -> int:
    # Decode a 32 bytes big endian unsigned integer from hex (optionally 0x prefixed) or RFC 4648 base32 text.
    if encoding == 'hex':
        text = data[2:] if data[:2] in ['0x', '0X'] else data
        if len(text) != size * 2:
            raise pyecrecover.error.DecodeError(f'expected {size * 2} hex digits, got {len(text)}')
        try:
            b = bytearray.fromhex(text)
        except ValueError as e:
            raise pyecrecover.error.DecodeError(f'invalid hex: {data!r}') from e
        if len(b) != size:
            raise pyecrecover.error.DecodeError(f'expected {size} bytes, got {len(b)}')
        return int.from_bytes(b)
    if encoding == 'base32':
        text = data.strip().upper().rstrip('=')
        text = text + '=' * (-len(text) % 8)
        try:
            b = base64.b32decode(text)
        except (binascii.Error, ValueError) as e:
            raise pyecrecover.error.DecodeError(f'invalid base32: {data!r}') from e
        # Unused trailing bits must be zero, otherwise several texts would name the same integer.
        if base64.b32encode(b).decode() != text:
            raise pyecrecover.error.DecodeError(f'non-canonical base32: {data!r}')
        if len(b) != size:
            raise pyecrecover.error.DecodeError(f'expected {size} bytes, got {len(b)}')
        return int.from_bytes(b)
    raise pyecrecover.error.DecodeError(f'unknown encoding {encoding!r}')


def encode(pubkey: pyecrecover.core.PubKey) -> str:
    return pubkey.hex()


def encode_base32(pubkey: pyecrecover.core.PubKey) -> str:
    b = pubkey.x.to_bytes(size) + pubkey.y.to_bytes(size)
    return base64.b32encode(b).decode()


def recover_public_key_text(e: str, r: str, s: str, v: int, encoding: str = 'hex') -> str:
    # Text in, text out. The output uses the same encoding as the input.
    e = decode(e, encoding)
    r = decode(r, encoding)
    s = decode(s, encoding)
    log.debug('decoded e=0x%064x r=0x%064x s=0x%064x v=%d', e, r, s, v)
    pubkey = pyecrecover.core.recover_public_key(e, r, s, v)
    if encoding == 'base32':
        return encode_base32(pubkey)
    return encode(pubkey)
