from mtp.crypto_constructor import aes_ctr, reused_pad
from mtp.utils import xor


def test_aes_ctr_reuses_key_stream():
    c = aes_ctr()
    plaintexts = [b'first message', b'second, longer message']
    ciphertexts = c.encrypt_all(plaintexts)

    stream = c.keystream(max(map(len, plaintexts)))
    for p, ct in zip(plaintexts, ciphertexts):
        assert xor(ct, stream) == p
        assert c.decrypt(ct) == p


def test_reused_pad_repeats_short_key():
    pad = reused_pad(key=b'\x01\x02')

    assert pad.keystream(5) == b'\x01\x02\x01\x02\x01'
    assert pad.decrypt(pad.encrypt(b'hello')) == b'hello'


def test_reused_pad_random_key():
    pad = reused_pad(length=16)

    assert len(pad.key) == 16
    assert pad.keystream(16) == pad.key
