import pytest

SIX_FREQS = {"a": 25, "e": 40, "i": 23, "o": 11, "s": 26, "t": 27}
SIX_ALPHABET = ["a", "e", "i", "o", "s", "t"]
SIX_CODES = {"e": "10", "a": "110", "i": "011", "o": "010", "s": "111", "t": "00"}


class RecordingSink:
    """File-like sink that keeps each write() call separately."""
    def __init__(self):
        self.writes = []

    def write(self, data):
        self.writes.append(bytes(data))
        return len(data)

    def getvalue(self):
        return b"".join(self.writes)


@pytest.fixture
def sink():
    return RecordingSink()
