"""
vigenere — interactive Vigenère encipher
=========================================
Run:  python -m vigenere_crypto   (or the `vigenere` console script)

Asks for a password and a line of plain text, then prints the
ciphertext on its own line.
"""

import argparse
import logging
import sys

from . import __version__
from .cipher import encipher
from .errors import VigenereError
from .key import normalize_key
from .prompt import read_line

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vigenere",
        description="Encipher one line of text with a Vigenère password.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug details (lengths only, never key or text).")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        password = read_line("Password: ")
        text     = read_line("Plain text: ")
    except (EOFError, KeyboardInterrupt):
        print("\naborted: no input", file=sys.stderr)
        return 1

    try:
        ciphertext = encipher(text, normalize_key(password))
    except VigenereError as e:
        logger.error("encipher failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"\n{ciphertext}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
