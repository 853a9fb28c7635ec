"""
CipherEngine — Vigenère Polyalphabetic Substitution
====================================================
Each letter of the plaintext is rotated by the key letter under the
keystream cursor. Non-letters are copied through unchanged.

Keystream scheduling: the cursor moves in lockstep with plaintext
POSITIONS, not plaintext letters. A space or a comma still consumes a
key letter:

    encipher("Attack at dawn", "lemon")  ->  "Lxfopv mh oeib"

Case: the output letter always takes the case of the plaintext letter,
whatever the case of the key letter.

Empty key: rejected with InvalidKey. There is no shift to cycle through.
"""

import logging
from typing import Optional

from .alphabet import ALPHABET_SIZE, case_floor, is_letter, is_lowercase
from .errors import InvalidKey, InvalidPlainText
from .key import normalize_key

logger = logging.getLogger(__name__)


def rotate(in_char: str, key_char: str) -> str:
    """
    Shift letter `in_char` by the alphabet position of `key_char`.
    The result stays in the case range of `in_char`.
    """
    in_floor  = ord(case_floor(in_char))
    key_floor = ord(case_floor(key_char))
    offset    = ((ord(in_char) - in_floor) + (ord(key_char) - key_floor)) % ALPHABET_SIZE
    return chr(in_floor + offset)


def encipher(plaintext: Optional[str], key: Optional[str]) -> str:
    """
    Encipher `plaintext` with canonical `key` (see normalize_key).

    Returns a new string of the same length. Raises InvalidPlainText if
    plaintext is None, InvalidKey if key is None, empty, or contains
    anything but lowercase letters.
    """
    if plaintext is None:
        raise InvalidPlainText("plaintext was None")
    if key is None:
        raise InvalidKey("key was None")
    if not key:
        raise InvalidKey("key has no letters")
    if not all(is_lowercase(c) for c in key):
        raise InvalidKey("key is not canonical; pass it through normalize_key first")

    out = []
    ki  = 0
    for ch in plaintext:
        if ki == len(key):
            ki = 0
        out.append(rotate(ch, key[ki]) if is_letter(ch) else ch)
        ki += 1

    logger.debug("enciphered %d characters with a %d-letter key", len(plaintext), len(key))
    return "".join(out)


class VigenereCipher:
    """
    Vigenère cipher bound to one passphrase.

    The passphrase is normalized once, here; a passphrase with no letters
    in it is rejected up front instead of failing on first use.
    """

    def __init__(self, passphrase: str):
        key = normalize_key(passphrase)
        if not key:
            raise InvalidKey("key has no letters")
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext string. Non-letters pass through."""
        return encipher(plaintext, self._key)
