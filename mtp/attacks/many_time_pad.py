"""Recover key and plaintext bytes from ciphertexts which were all XOR encrypted
with the same key (many-time pad).

Combining two such ciphertexts cancels the key and leaves the XOR of the two
plaintexts. Offsets where this combination stays below a fixed marker value for
every partner of a ciphertext are treated as space pairings, which reveals one
key byte and one plaintext byte per partner.
"""
import warnings

from mtp.utils import xor, render


__all__ = ['MARKER', 'Recovery', 'combine', 'detect_candidates', 'recover']

# detection threshold and reveal value at the same time
MARKER = 65

ON_CONFLICT = ('ignore', 'warn', 'raise')


def combine(a, b):
    r"""XOR two ciphertexts up to the length of the shorter one.

    If both were encrypted with the same key the key cancels out and only
    `plaintext_a XOR plaintext_b` remains.

    Example:
    ```python
    >>> combine(bytes([1, 1, 1, 1, 1]), bytes([2, 2, 2, 2, 2]))
    b'\x03\x03\x03\x03\x03'
    >>> combine(b'ABCD', b'AB')
    b'\x00\x00'
    >>> combine(b'', b'ABC')
    b''

    ```

    Arguments:
        a {byteslike} -- The first ciphertext
        b {byteslike} -- The second ciphertext

    Returns:
        bytes -- Combined cipher of length `min(len(a), len(b))`
    """
    n = min(len(a), len(b))
    return xor(a[:n], b[:n])


def detect_candidates(combined, marker=MARKER):
    """Find the offsets of a combined cipher which may still be a space pairing.

    Every offset whose value is at least `marker` is counter evidence and is left out.

    Example:
    ```python
    >>> detect_candidates(bytes([0, 64, 65, 66]))
    {0, 1}
    >>> detect_candidates(b'')
    set()

    ```

    Arguments:
        combined {byteslike} -- Output of `combine`

    Keyword Arguments:
        marker {int} -- Values below this are space candidates (default: {MARKER})

    Returns:
        set -- Offsets which survive as space candidates
    """
    return {k for k, value in enumerate(combined) if value < marker}


def _surviving_offsets(i, ciphertexts, marker):
    c = ciphertexts[i]
    partners = [other for j, other in enumerate(ciphertexts) if j != i]
    if not partners:
        return []

    maybe_space = [True] * min(len(c), max(map(len, partners)))

    for other in partners:
        combined = combine(c, other)
        candidates = detect_candidates(combined, marker=marker)
        for k in range(len(combined)):
            if k not in candidates:
                maybe_space[k] = False

    return [k for k, is_candidate in enumerate(maybe_space) if is_candidate]


class Recovery(object):
    """Partially recovered key and plaintexts.

    Unresolved positions are `0`. `plaintexts[i]` belongs to `ciphertexts[i]`,
    i.e. to the ciphertexts in the order they were processed.

    Attributes:
        ciphertexts {list} -- The ciphertexts in processing order
        key {bytes} -- The recovered key, as long as the longest ciphertext
        plaintexts {list} -- One recovered buffer per ciphertext
        resolved {set} -- Offsets at which a key byte was derived
        conflicts {list} -- `(offset, previous, new)` for every key byte overwritten with a different value
    """

    def __init__(self, ciphertexts, key, plaintexts, resolved, conflicts):
        self.ciphertexts = ciphertexts
        self.key = key
        self.plaintexts = plaintexts
        self.resolved = resolved
        self.conflicts = conflicts

    def __iter__(self):
        return iter([self.key, self.plaintexts])

    def render(self):
        lines = [f"Cracked encryption key {render(self.key)}"]
        for i, m in enumerate(self.plaintexts):
            lines.append(f"Cracked message ({i}) : {render(m)}")
        return '\n'.join(lines)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"<Recovery {len(self.resolved)}/{len(self.key)} key bytes>"


def recover(ciphertexts, marker=MARKER, sort=True, on_conflict='warn'):
    r"""Recover key and plaintext bytes at offsets which look like space pairings.

    Every ciphertext is combined with every other one. An offset survives for
    ciphertext `i` only if the combination with each partner covering that
    offset is below `marker`. For each surviving offset the key byte becomes
    `c_i[offset] ^ marker` and every partner's plaintext byte becomes
    `combine(c_i, c_j)[offset] ^ marker`. Ciphertexts processed later overwrite
    earlier results.

    Example:
    ```python
    >>> ciphertexts = [bytes(4), bytes([0x10, 0x50, 0x01, 0x70]), bytes([0x11, 0x02])]
    >>> result = recover(ciphertexts, on_conflict='ignore')
    >>> result.key
    b'P\x00@\x00'
    >>> result.plaintexts
    [b'P\x00@\x00', b'@\x00@\x00', b'@\x00']
    >>> sorted(result.resolved)
    [0, 2]

    ```

    Arguments:
        ciphertexts {iterable} -- Iterable of `bytes` encrypted with the same key

    Keyword Arguments:
        marker {int} -- Detection threshold and reveal value (default: {MARKER})
        sort {bool} -- Process the ciphertexts ordered by descending length (default: {True})
        on_conflict {str} -- What to do if a key byte is overwritten with a different value, one of 'ignore', 'warn' or 'raise' (default: {'warn'})

    Raises:
        ValueError: If `marker` is no byte value or `on_conflict` is unknown
        RuntimeError: If `on_conflict='raise'` and the evidence disagrees

    Returns:
        Recovery -- The recovered key and plaintexts
    """
    if on_conflict not in ON_CONFLICT:
        raise ValueError(f"Unknown conflict policy '{on_conflict}'! Use one of {', '.join(ON_CONFLICT)}")
    if not 0 <= marker < 256:
        raise ValueError(f"Marker has to be a byte value: {marker}")

    ciphertexts = [bytes(c) for c in ciphertexts]
    if sort:
        ciphertexts.sort(key=len, reverse=True)

    key = bytearray(max(map(len, ciphertexts), default=0))
    plaintexts = [bytearray(len(c)) for c in ciphertexts]
    resolved = set()
    conflicts = []

    for i, c in enumerate(ciphertexts):
        offsets = _surviving_offsets(i, ciphertexts, marker)
        if not offsets:
            continue

        combined = {j: combine(c, other) for j, other in enumerate(ciphertexts) if j != i}

        for idx in offsets:
            key_byte = c[idx] ^ marker
            if idx in resolved and key[idx] != key_byte:
                conflicts.append((idx, key[idx], key_byte))
            key[idx] = key_byte
            resolved.add(idx)

            # partners shorter than idx have nothing to reveal here
            for j, combi in combined.items():
                if idx < len(combi):
                    plaintexts[j][idx] = combi[idx] ^ marker

    if conflicts:
        offsets = sorted({offset for offset, _, _ in conflicts})
        msg = f"{len(conflicts)} key byte(s) were overwritten with disagreeing values at offsets {offsets}"
        if on_conflict == 'raise':
            raise RuntimeError(msg)
        if on_conflict == 'warn':
            warnings.warn(msg, RuntimeWarning, stacklevel=2)

    return Recovery(ciphertexts, bytes(key), [bytes(p) for p in plaintexts], resolved, conflicts)
