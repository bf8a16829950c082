import string
from typing import Iterable, Tuple

LOWERCASE = tuple(string.ascii_lowercase)
# a-z plus the word delimiter
DEFAULT_ALPHABET = LOWERCASE + (" ",)

def parse_alphabet(symbols: Iterable[str]) -> Tuple[str, ...]:
    """
    Validate an ordered alphabet and return it as a tuple.
    Each symbol must be a single character and appear once.
    """
    out = tuple(symbols)
    if not out:
        raise ValueError("alphabet must not be empty")
    seen = set()
    for s in out:
        if not isinstance(s, str) or len(s) != 1:
            raise ValueError(f"alphabet symbol must be a single character, got {s!r}")
        if s in seen:
            raise ValueError(f"duplicate symbol in alphabet: {s!r}")
        seen.add(s)
    return out
