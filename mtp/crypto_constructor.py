r"""This module exposes ciphers which (incorrectly) encrypt every message with
the same key stream. They produce many-time pad ciphertext sets for experiments.

Example:
```python
>>> from mtp.utils import xor
>>> c = aes_ctr(key=b'YELLOW SUBMARINE', nonce=bytes(16))
>>> a, b = c.encrypt_all([b'attack at dawn', b'defend at dusk'])
>>> xor(a, b) == xor(b'attack at dawn', b'defend at dusk')
True

```
"""

from cryptography.hazmat.primitives.ciphers import Cipher
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives.ciphers import algorithms, modes

import secrets

from mtp.utils import xor

__all__ = ['aes_ctr', 'reused_pad']


class _ReusedKeyInterface(object):
    def encrypt_all(self, plaintexts):
        return [self.encrypt(p) for p in plaintexts]


class SimpleSymCipherInterface(_ReusedKeyInterface):
    def __init__(self, cipher, alg_name, mode_name, **kvargs):
        self.cipher = cipher
        self.alg_name = alg_name
        self.mode_name = mode_name

        for k in kvargs:
            setattr(self, k, kvargs[k])

    def encrypt(self, plaintext):
        # a fresh encryptor restarts the key stream for every message
        enc = self.cipher.encryptor()
        return enc.update(plaintext) + enc.finalize()

    def decrypt(self, ciphertext):
        dec = self.cipher.decryptor()
        return dec.update(ciphertext) + dec.finalize()

    def keystream(self, n):
        return self.encrypt(bytes(n))

    def __str__(self):
        return repr(self)

    def __repr__(self):
        return f"<SimpleSymCipherInterface {self.alg_name} | {self.mode_name}>"


class ReusedPad(_ReusedKeyInterface):
    r"""XOR pad which is applied to every message. Keys shorter than a message repeat.

    ```python
    >>> pad = ReusedPad(b'\x01\x02')
    >>> pad.encrypt(b'@@@')
    b'ABA'
    >>> pad.decrypt(b'ABA')
    b'@@@'

    ```
    """

    def __init__(self, key):
        self.key = key

    def encrypt(self, plaintext):
        return xor(plaintext, self.key)

    def decrypt(self, ciphertext):
        return xor(ciphertext, self.key)

    def keystream(self, n):
        return xor(bytes(n), self.key)

    def __str__(self):
        return repr(self)

    def __repr__(self):
        return f"<ReusedPad {len(self.key)} bytes>"


def aes_ctr(key=None, nonce=None):
    if key is None:
        key = secrets.token_bytes(16)
    if nonce is None:
        nonce = secrets.token_bytes(16)

    c = Cipher(algorithms.AES(key), modes.CTR(nonce), default_backend())
    return SimpleSymCipherInterface(c, 'AES', 'CTR', key=key, nonce=nonce)


def reused_pad(key=None, length=256):
    if key is None:
        key = secrets.token_bytes(length)

    return ReusedPad(key)
