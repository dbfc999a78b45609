"""
Store-assigned document identifiers.

Identifiers are 24 lowercase hex characters laid out like a MongoDB ObjectId:
4-byte big-endian creation time, 5 random bytes fixed per process, and a
3-byte counter. Sorting identifiers as strings therefore sorts documents by
insertion order.
"""

import itertools
import os
import random
import re
import time

OBJECT_ID_LENGTH = 24

_OBJECT_ID_RE = re.compile(r"^[0-9a-f]{24}$")

_process_unique = os.urandom(5)
_counter = itertools.count(random.randint(0, 0xFFFFFF))


def new_object_id() -> str:
    """Returns a fresh identifier for a document about to be inserted."""
    timestamp = int(time.time()).to_bytes(4, "big")
    counter = (next(_counter) & 0xFFFFFF).to_bytes(3, "big")
    return (timestamp + _process_unique + counter).hex()


def is_valid_object_id(value: object) -> bool:
    """True when `value` is shaped like an identifier this store could have issued."""
    return isinstance(value, str) and bool(_OBJECT_ID_RE.match(value.lower()))
