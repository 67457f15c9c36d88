"""
Character categories for password generation
"""

from typing import List

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()_-+=[]{}|;:,.<>?"


def build_charset(
    lowercase: bool = True,
    uppercase: bool = True,
    digits: bool = True,
    symbols: bool = True,
) -> List[str]:
    """
    Concatenate the selected categories in fixed order
    Returns an empty list when nothing is selected
    """
    charset: List[str] = []
    if lowercase:
        charset.extend(LOWERCASE)
    if uppercase:
        charset.extend(UPPERCASE)
    if digits:
        charset.extend(DIGITS)
    if symbols:
        charset.extend(SYMBOLS)
    return charset
