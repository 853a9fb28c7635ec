"""
Alphabet — ASCII Latin letter ranges
=====================================
Two disjoint closed ranges, uppercase A(65)..Z(90) and lowercase
a(97)..z(122). A letter and its opposite-case counterpart are always
32 apart.

Only these 52 characters are letters here. str.isalpha() is not used:
it accepts accented and non-Latin letters, which the cipher passes
through untouched.
"""

UPPER_FLOOR   = "A"
UPPER_CEIL    = "Z"
LOWER_FLOOR   = "a"
LOWER_CEIL    = "z"
CASE_DISTANCE = ord(LOWER_FLOOR) - ord(UPPER_FLOOR)   # 32
ALPHABET_SIZE = 26


def is_uppercase(c: str) -> bool:
    return len(c) == 1 and UPPER_FLOOR <= c <= UPPER_CEIL


def is_lowercase(c: str) -> bool:
    return len(c) == 1 and LOWER_FLOOR <= c <= LOWER_CEIL


def is_letter(c: str) -> bool:
    return is_lowercase(c) or is_uppercase(c)


def case_floor(c: str) -> str:
    """
    Lowest letter of the range `c` belongs to.
    Anything that is not lowercase is floored as uppercase; callers only
    pass characters already known to be letters.
    """
    return LOWER_FLOOR if is_lowercase(c) else UPPER_FLOOR
