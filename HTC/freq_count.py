from collections import Counter
from typing import Optional

def tally_word(word: str, freqs: Optional[Counter] = None) -> Counter:
    """Add each character of `word` to `freqs` as-is (no case folding)."""
    if freqs is None:
        freqs = Counter()
    freqs.update(word)
    return freqs

def count_frequencies(text: str, fold_case: bool = True, count_delimiters: bool = False) -> Counter:
    """
    Character counts for a whole document.

    Default mode splits lines on '\\n' and words on a single ' ', then tallies
    the words (lowercased when fold_case). The delimiters themselves are
    dropped, so ' ' and '\\n' always count 0.
    count_delimiters=True tallies every raw character instead.
    """
    if count_delimiters:
        return Counter(text.lower() if fold_case else text)
    freqs = Counter()
    for line in text.split("\n"):
        for word in line.split(" "):
            tally_word(word.lower() if fold_case else word, freqs)
    return freqs

def read_text(path) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()
