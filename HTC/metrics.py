from typing import Iterable, Mapping

import numpy as np

from huff_codes import CodeTable

def _counts(freqs: Mapping[str, int], alphabet: Iterable[str]) -> np.ndarray:
    return np.array([freqs.get(s, 0) for s in alphabet], dtype=np.float64)

def entropy_bits(freqs: Mapping[str, int], alphabet: Iterable[str]) -> float:
    """Shannon entropy (bits/symbol) of the counts restricted to the alphabet."""
    c = _counts(freqs, alphabet)
    total = c.sum()
    if total == 0:
        return 0.0
    p = c[c > 0] / total
    return float(-(p * np.log2(p)).sum())

def average_code_length(freqs: Mapping[str, int], table: CodeTable) -> float:
    """Frequency-weighted mean code length in bits/symbol."""
    c = _counts(freqs, table.alphabet)
    total = c.sum()
    if total == 0:
        return 0.0
    lengths = np.array([len(table.codes[s]) for s in table.alphabet], dtype=np.float64)
    return float((c * lengths).sum() / total)

def compression_ratio(input_bytes: int, output_bytes: int) -> float:
    if output_bytes == 0:
        return float("inf")
    return float(input_bytes) / float(output_bytes)
