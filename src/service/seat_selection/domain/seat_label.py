"""
Seat label helpers

Row and seat labels are free-form ("R12", "PERMANTO 1", "Seat 14", "B").
Numeric extraction fails soft: no digits means no number, never an error.
"""

import re
from typing import Optional


_NON_DIGIT = re.compile(r'\D')


def extract_number(label: Optional[str]) -> Optional[int]:
    """Concatenate every digit of the label ("R1-2" -> 12), None when there is none"""
    if not label:
        return None
    digits = _NON_DIGIT.sub('', label)
    return int(digits) if digits else None


def is_single_letter(label: Optional[str]) -> bool:
    return bool(label) and len(label) == 1 and label.isalpha()


def letter_distance(first: str, second: str) -> int:
    return abs(ord(first.upper()) - ord(second.upper()))
