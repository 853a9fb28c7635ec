"""
KeyNormalizer
=============
Turns a user-supplied passphrase into the canonical key that drives the
cipher: letters only, all lowercase, original order kept.

    "P@ss-w0rd!"  ->  "psswrd"
    "12345"       ->  ""

Normalizing an already-canonical key returns it unchanged.
"""

import logging
from typing import Optional

from .alphabet import CASE_DISTANCE, is_letter, is_uppercase
from .errors import InvalidKey

logger = logging.getLogger(__name__)


def _fold(c: str) -> str:
    return chr(ord(c) + CASE_DISTANCE) if is_uppercase(c) else c


def normalize_key(raw_key: Optional[str]) -> str:
    """
    Drop every non-letter from `raw_key` and fold the rest to lowercase.
    Returns "" when no letters survive; rejecting that is up to the caller.
    Raises InvalidKey if `raw_key` is None.
    """
    if raw_key is None:
        raise InvalidKey("key was None")

    key = "".join(_fold(c) for c in raw_key if is_letter(c))
    logger.debug("normalized key: kept %d of %d characters", len(key), len(raw_key))
    return key
