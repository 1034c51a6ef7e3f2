import pyecrecover
import pytest

e_hex = 'fcde2b2edba56bf408601fb721fe9b5c338d10ee429ea04fae5511b68fbf8fb9'
r_hex = 'a3363e2de5d5daa178c324e99801f51fe24ffa500019f396796048b1d5032de9'
s_hex = '826e15e52401eafc6d81fe82dfec2b868e87b7810ab21db1ee5731c00cd896b8'
e_b32 = '7TPCWLW3UVV7ICDAD63SD7U3LQZY2EHOIKPKAT5OKUI3ND57R64Q===='
r_b32 = 'UM3D4LPF2XNKC6GDETUZQAPVD7RE76SQAAM7HFTZMBELDVIDFXUQ===='
s_b32 = 'QJXBLZJEAHVPY3MB72BN73BLQ2HIPN4BBKZB3MPOK4Y4ADGYS24A===='
pubkey_hex = ''.join([
    'cc9519ba6fb1cb0cca53743dc90c2418440cf637f8b891ce2f0e2dc5c5b3cf01',
    '38af07d191974089c03e0ca56568f35ee1875e464c6737670025d4512dc8aa17',
])
pubkey_b32 = 'ZSKRTOTPWHFQZSSTOQ64SDBEDBCAZ5RX7C4JDTRPBYW4LRNTZ4ATRLYH2GIZOQEJYA7AZJLFNDZV5YMHLZDEYZZXM4ACLVCRFXEKUFY='


def test_decode_hex():
    assert pyecrecover.codec.decode(r_hex) == 73822833206246044331228008262087004113076292229679808334250850393445001014761
    assert pyecrecover.codec.decode('0x' + r_hex) == pyecrecover.codec.decode(r_hex)
    assert pyecrecover.codec.decode(r_hex.upper()) == pyecrecover.codec.decode(r_hex)
    assert pyecrecover.codec.decode('00' * 31 + '01') == 1


def test_decode_hex_malformed():
    with pytest.raises(pyecrecover.error.DecodeError):
        pyecrecover.codec.decode(r_hex[2:])
    with pytest.raises(pyecrecover.error.DecodeError):
        pyecrecover.codec.decode(r_hex + '00')
    with pytest.raises(pyecrecover.error.DecodeError):
        pyecrecover.codec.decode('zz' + r_hex[2:])
    with pytest.raises(pyecrecover.error.DecodeError):
        pyecrecover.codec.decode('')
    with pytest.raises(ValueError):
        pyecrecover.codec.decode(r_hex[:-2] + ' 0')


def test_decode_base32():
    assert pyecrecover.codec.decode(r_b32, 'base32') == pyecrecover.codec.decode(r_hex)
    assert pyecrecover.codec.decode(r_b32.rstrip('='), 'base32') == pyecrecover.codec.decode(r_hex)
    assert pyecrecover.codec.decode(r_b32.lower(), 'base32') == pyecrecover.codec.decode(r_hex)


def test_decode_base32_malformed():
    with pytest.raises(pyecrecover.error.DecodeError):
        pyecrecover.codec.decode(r_b32[8:], 'base32')
    with pytest.raises(pyecrecover.error.DecodeError):
        pyecrecover.codec.decode('1' + r_b32[1:], 'base32')
    with pytest.raises(pyecrecover.error.DecodeError):
        pyecrecover.codec.decode(r_b32, 'base64')
    with pytest.raises(pyecrecover.error.DecodeError):
        pyecrecover.codec.decode('\u00e9' * 52, 'base32')


def test_decode_base32_non_canonical():
    # The last character carries unused low bits. Only the text with those bits cleared is accepted.
    assert r_b32.endswith('FXUQ====')
    with pytest.raises(pyecrecover.error.DecodeError):
        pyecrecover.codec.decode(r_b32.replace('FXUQ', 'FXUR'), 'base32')


def test_encode():
    pubkey = pyecrecover.core.PubKey.hex_decode(pubkey_hex)
    assert pyecrecover.codec.encode(pubkey) == pubkey_hex
    assert pyecrecover.codec.encode_base32(pubkey) == pubkey_b32


def test_encode_padding():
    # Coordinates with leading zero bytes keep their full width.
    pubkey = pyecrecover.core.PriKey(153).pubkey()
    data = pyecrecover.codec.encode(pubkey)
    assert data.startswith('00e3ae1974566ca0')
    assert len(data) == 128
    assert int(data[:64], 16) == pubkey.x
    assert int(data[64:], 16) == pubkey.y


def test_recover_public_key_text():
    assert pyecrecover.codec.recover_public_key_text(e_hex, r_hex, s_hex, 1) == pubkey_hex
    assert pyecrecover.codec.recover_public_key_text(e_b32, r_b32, s_b32, 1, 'base32') == pubkey_b32


def test_recover_public_key_text_malformed():
    # Text errors are reported before any arithmetic happens.
    with pytest.raises(pyecrecover.error.DecodeError):
        pyecrecover.codec.recover_public_key_text(e_hex, r_hex[1:], s_hex, 1)
    with pytest.raises(pyecrecover.error.DecodeError):
        pyecrecover.codec.recover_public_key_text(e_hex, r_hex, s_hex, 1, 'base64')
