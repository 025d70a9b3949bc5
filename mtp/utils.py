import binascii
from itertools import cycle


class DecodeError(ValueError):
    """Raised if a ciphertext literal is not a valid hexadecimal string."""


def xor(buffer, x):
    r"""Compute the XOR of the given operands

    The second operand may either be a single value or a list-like of values.
    If so, it will be applied cyclicly.

    Examples:
    ```python
    >>> xor(b'\x00\x01\x02', 0x41)
    b'A@C'

    ```

    ```python
    >>> xor(bytes(5), b'AB')
    b'ABABA'

    ```

    Arguments:
        buffer {byteslike} -- The first operand
        x {int or list of int} -- The second operand

    Returns:
        bytes -- The result of the XOR operation
    """
    try:
        it = cycle(x)
    except TypeError:
        it = cycle([x])

    return bytes([op1 ^ op2 for op1, op2 in zip(buffer, it)])


def unhex(hex_string):
    r"""Decode a hexadecimal ciphertext literal into raw bytes.

    Example:
    ```python
    >>> unhex('16011143')
    b'\x16\x01\x11C'
    >>> unhex('0a1')  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    DecodeError: Invalid hex string '0a1'

    ```

    Arguments:
        hex_string {str or bytes} -- Hex digits, two per byte, no separators

    Raises:
        DecodeError: If the string has odd length or contains non-hex characters

    Returns:
        bytes -- The decoded bytes
    """
    try:
        return binascii.unhexlify(hex_string)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid hex string {hex_string!r}: {e}") from e


def render(buffer):
    r"""Debug representation of a (partially recovered) byte buffer.

    ```python
    >>> render(bytearray(b'A\x00B'))
    "b'A\\x00B'"

    ```
    """
    return repr(bytes(buffer))
