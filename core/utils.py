# core/utils.py

"""
Repository for program-wide utilities.
"""

import random
import string

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_mock_id(length: int = 9) -> str:
    return "".join(random.choice(_ID_ALPHABET) for _ in range(length))


def split_comma_list(raw: str | None) -> list[str]:
    if not raw:
        return []

    return [item.strip() for item in raw.split(",") if item.strip()]
