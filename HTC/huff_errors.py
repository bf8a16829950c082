class EncodingError(ValueError):
    """A text character has no entry in the code table."""
    def __init__(self, char: str, position: int):
        super().__init__(f"character {char!r} at position {position} is not in the code table")
        self.char = char
        self.position = position

class TreeInvariantError(RuntimeError):
    """Huffman tree or code table is structurally broken (a bug, not bad input)."""
