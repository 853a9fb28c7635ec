"""
vigenere_crypto
===============
Vigenère polyalphabetic substitution over the 26-letter ASCII alphabet.

    normalize_key("P@ss-w0rd!")             -> "psswrd"
    encipher("Attack at dawn", "lemon")     -> "Lxfopv mh oeib"

Modules:
    alphabet  — letter ranges and case predicates
    key       — passphrase -> canonical lowercase key
    cipher    — rotation shift, keystream loop, VigenereCipher
    prompt    — read one line for a prompt
    __main__  — interactive command line

License: Apache 2.0
"""

__version__ = "1.0.0"

from .alphabet import is_uppercase, is_lowercase, is_letter, case_floor
from .errors   import VigenereError, InvalidKey, InvalidPlainText
from .key      import normalize_key
from .cipher   import rotate, encipher, VigenereCipher
from .prompt   import read_line

__all__ = [
    "is_uppercase",
    "is_lowercase",
    "is_letter",
    "case_floor",
    "VigenereError",
    "InvalidKey",
    "InvalidPlainText",
    "normalize_key",
    "rotate",
    "encipher",
    "VigenereCipher",
    "read_line",
]
