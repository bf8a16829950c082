from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Tuple

import numpy as np

from huff_errors import EncodingError, TreeInvariantError
from huff_tree import HuffmanTree, build_tree

# code given to the only symbol of a one-symbol alphabet
SINGLE_SYMBOL_CODE = "0"

@dataclass(frozen=True)
class CodeTable:
    codes: Dict[str, str]
    alphabet: Tuple[str, ...]
    _bits: Dict[str, np.ndarray] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        missing = [s for s in self.alphabet if s not in self.codes]
        if missing:
            raise TreeInvariantError(f"no code derived for {missing!r}")
        bits = {s: np.frombuffer(c.encode("ascii"), dtype=np.uint8) - ord("0")
                for s, c in self.codes.items()}
        object.__setattr__(self, "_bits", bits)

    def __len__(self):
        return len(self.codes)

    def __contains__(self, ch):
        return ch in self.codes

    def bits_for(self, ch: str, position: int = 0, fold_case: bool = False) -> np.ndarray:
        try:
            return self._bits[ch.lower() if fold_case else ch]
        except KeyError:
            raise EncodingError(ch, position) from None

    def encode(self, text: str, start: int = 0, fold_case: bool = False) -> np.ndarray:
        """
        Concatenate the codes of every character of `text`, in order.
        Returns a uint8 array of 0/1. `start` offsets positions in errors.
        fold_case lowercases one character at a time, so error positions
        index the caller's text.
        """
        parts = [self.bits_for(ch, start + i, fold_case) for i, ch in enumerate(text)]
        if not parts:
            return np.zeros(0, dtype=np.uint8)
        return np.concatenate(parts)

    def __str__(self):
        return format_code_table(self)

def derive_codes(tree: HuffmanTree) -> CodeTable:
    """
    Walk the tree depth-first (explicit stack), '0' left / '1' right,
    and record the path at each leaf.
    """
    root = tree.root_node
    if root.is_leaf:
        return CodeTable(codes={root.sym: SINGLE_SYMBOL_CODE}, alphabet=tree.alphabet)

    codes: Dict[str, str] = {}
    stack = [(tree.root, "")]
    while stack:
        idx, prefix = stack.pop()
        node = tree.nodes[idx]
        if node.is_leaf:
            if node.left is not None or node.right is not None:
                raise TreeInvariantError(f"leaf {node.sym!r} has children")
            if node.sym in codes:
                raise TreeInvariantError(f"symbol {node.sym!r} reached twice")
            codes[node.sym] = prefix
            continue
        if node.left is None or node.right is None:
            raise TreeInvariantError(f"internal node {node.seq_id} is missing a child")
        # right pushed first so the left subtree is visited first
        stack.append((node.right, prefix + "1"))
        stack.append((node.left, prefix + "0"))
    return CodeTable(codes=codes, alphabet=tree.alphabet)

def build_code_table(freqs: Mapping[str, int], alphabet: Iterable[str]) -> CodeTable:
    return derive_codes(build_tree(freqs, alphabet))

def format_code_table(table: CodeTable) -> str:
    """One '<symbol> = <bits>' line per symbol, in alphabet order."""
    return "".join(f"{s} = {table.codes[s]}\n" for s in table.alphabet)
