from __future__ import annotations
import heapq
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple

from alphabet import parse_alphabet
from huff_errors import TreeInvariantError

# tie-break rank on equal frequency: leaves before merged nodes
_LEAF, _INTERNAL = 0, 1

@dataclass(frozen=True)
class HuffmanNode:
    freq: int
    sym: Optional[str] = None
    seq_id: Optional[int] = None
    left: Optional[int] = None   # arena index
    right: Optional[int] = None  # arena index

    @property
    def is_leaf(self) -> bool:
        return self.sym is not None

    def sort_key(self) -> Tuple[int, int, str, int]:
        """Total order used by the merge heap."""
        if self.is_leaf:
            return (self.freq, _LEAF, self.sym, 0)
        return (self.freq, _INTERNAL, "", self.seq_id)

@dataclass(frozen=True)
class HuffmanTree:
    nodes: Tuple[HuffmanNode, ...]
    root: int
    alphabet: Tuple[str, ...]

    @property
    def root_node(self) -> HuffmanNode:
        return self.nodes[self.root]

    def leaves(self) -> List[HuffmanNode]:
        return [n for n in self.nodes if n.is_leaf]

    def internals(self) -> List[HuffmanNode]:
        return [n for n in self.nodes if not n.is_leaf]

    def children(self, idx: int) -> Tuple[HuffmanNode, HuffmanNode]:
        node = self.nodes[idx]
        if node.is_leaf:
            raise TreeInvariantError(f"leaf {node.sym!r} has no children")
        return self.nodes[node.left], self.nodes[node.right]

def build_tree(freqs: Mapping[str, int], alphabet: Iterable[str]) -> HuffmanTree:
    """
    Canonical Huffman merge over a fixed alphabet.

    One leaf per alphabet symbol (frequency 0 when absent from freqs).
    Each merge pops the two smallest nodes; the first becomes the left
    child, the second the right child, and the new node gets the next
    seq_id (1, 2, ...). Ordering: frequency, then leaf before internal,
    then symbol (leaves) or seq_id (internals).
    """
    symbols = parse_alphabet(alphabet)
    nodes: List[HuffmanNode] = []
    pq = []
    for s in symbols:
        f = int(freqs.get(s, 0))
        if f < 0:
            raise ValueError(f"negative frequency for {s!r}: {f}")
        nodes.append(HuffmanNode(freq=f, sym=s))
        pq.append((nodes[-1].sort_key(), len(nodes) - 1))
    heapq.heapify(pq)

    for seq_id in range(1, len(symbols)):
        if len(pq) < 2:
            raise TreeInvariantError(f"merge {seq_id}: only {len(pq)} node(s) left on the heap")
        _, a = heapq.heappop(pq)
        _, b = heapq.heappop(pq)
        nodes.append(HuffmanNode(
            freq=nodes[a].freq + nodes[b].freq,
            seq_id=seq_id, left=a, right=b,
        ))
        heapq.heappush(pq, (nodes[-1].sort_key(), len(nodes) - 1))

    if len(pq) != 1:
        raise TreeInvariantError(f"expected a single root, found {len(pq)} nodes")
    return HuffmanTree(nodes=tuple(nodes), root=pq[0][1], alphabet=symbols)
