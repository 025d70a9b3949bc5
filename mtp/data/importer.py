import os
import json
import enum
from collections import OrderedDict

from mtp.utils import unhex

__all__ = ['load', 'load_ciphertexts', 'Res', 'CACHE_SIZE']
__folder__ = os.path.dirname(__file__)
CACHE_SIZE = 4
CACHE = OrderedDict()


class Res(enum.Enum):
    MTP_ciphertexts_1 = 1  # hex literals sharing one key, the longest one is all zeros

    EN_sentences_1 = 10


RESOURCES = {
    Res.MTP_ciphertexts_1: 'ciphertexts_1.json',
    Res.EN_sentences_1: 'sentences_en_1.json'
}


def load(resource_id):
    """Load a packaged resource. The most recently used resources are cached.

    Example:
    ```python
    >>> ciphertexts = load(Res.MTP_ciphertexts_1)
    >>> len(ciphertexts)
    9
    >>> set(max(ciphertexts, key=len))
    {'0'}

    ```

    Arguments:
        resource_id {Res} -- The resource to load

    Returns:
        list -- The decoded JSON content
    """
    if resource_id in CACHE:
        CACHE.move_to_end(resource_id)
        return CACHE[resource_id]

    with open(os.path.join(__folder__, RESOURCES[resource_id]), 'r') as f:
        data = json.load(f)

    while len(CACHE) >= CACHE_SIZE:
        CACHE.popitem(last=False)

    CACHE[resource_id] = data

    return data


def load_ciphertexts(resource_id=Res.MTP_ciphertexts_1):
    r"""Load a resource of hex literals as raw ciphertexts.

    ```python
    >>> [len(c) for c in load_ciphertexts()]
    [70, 168, 149, 125, 155, 149, 100, 30, 178]

    ```

    Raises:
        DecodeError: If one of the literals is not valid hex

    Returns:
        list -- List of `bytes`
    """
    return [unhex(h) for h in load(resource_id)]
