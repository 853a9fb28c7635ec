"""
vigenere_crypto — Live Demo
===========================
Run:  python examples/demo.py

Walks through key normalization and enciphering on a few messages.
"""

import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_crypto import normalize_key, encipher, VigenereCipher, InvalidKey

LINE = "═" * 70

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value!r}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
header("Key normalization")
for raw in ["P@ss-w0rd!", "L-E-M-O-N", "12345"]:
    ok(raw, normalize_key(raw) or "(no letters)")

header("Enciphering")
for text, raw in [("Attack at dawn", "lemon"),
                  ("Hello, World!", "key"),
                  ("ATTACKATDAWN", "LEMON")]:
    ok(f"{text!r} with {raw!r}", encipher(text, normalize_key(raw)))

header("Keystream follows positions")
ok("'aaaa' with 'ba'", encipher("aaaa", "ba"))
ok("'a-aa' with 'ba'", encipher("a-aa", "ba"))

header("Empty key")
try:
    VigenereCipher("12345")
except InvalidKey as e:
    ok("rejected", str(e))

print(f"\n{LINE}\n")
