from typing import Optional


def count_alphabetic(text: str) -> int:
    # Unicode letters only; digits, punctuation and whitespace do not count
    return sum(1 for c in text if c.isalpha())


def passes(text: str, min_length: Optional[int]) -> bool:
    if min_length is None:
        return True
    return count_alphabetic(text) >= min_length
