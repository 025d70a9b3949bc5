import pytest

from mtp.utils import unhex, xor, DecodeError


def test_unhex_accepts_str_and_bytes():
    assert unhex('00ff41') == b'\x00\xffA'
    assert unhex(b'00ff41') == b'\x00\xffA'


@pytest.mark.parametrize('literal', ['0', 'abc', 'zz', '00 11'])
def test_unhex_rejects_malformed(literal):
    with pytest.raises(DecodeError):
        unhex(literal)


def test_decode_error_is_value_error():
    with pytest.raises(ValueError):
        unhex('x')


def test_xor_cycles_key():
    assert xor(b'AAAA', b'\x01\x02') == b'@C@C'
