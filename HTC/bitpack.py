import numpy as np

from huff_codes import CodeTable

# characters encoded per numpy batch in pack_text
TEXT_SLICE = 1 << 16

class BitPacker:
    """
    MSB-first bit accumulator that writes whole bytes to `sink` in chunks
    of `buffer_size`. The chunk size only changes how the bytes are batched
    into sink.write() calls, never the bytes themselves.
    """
    def __init__(self, sink, buffer_size: int):
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be a positive integer, got {buffer_size}")
        self._sink = sink
        self.buffer_size = buffer_size
        self._buf = bytearray()
        self._pending = np.zeros(0, dtype=np.uint8)  # 0..7 bits short of a byte
        self._finished = False
        self.bits_written = 0
        self.bytes_written = 0
        self.write_calls = 0

    def write_bits(self, bits):
        if self._finished:
            raise ValueError("BitPacker already finished")
        bits = np.asarray(bits, dtype=np.uint8)
        if bits.size == 0:
            return
        self.bits_written += bits.size
        if self._pending.size:
            bits = np.concatenate([self._pending, bits])
        whole = bits.size - bits.size % 8
        self._pending = bits[whole:].copy()
        if whole:
            self._buf += np.packbits(bits[:whole]).tobytes()
            self._flush_full()

    def _flush_full(self):
        n = self.buffer_size
        full = len(self._buf) - len(self._buf) % n
        for i in range(0, full, n):
            self._emit(self._buf[i:i + n])
        del self._buf[:full]

    def _emit(self, chunk):
        self._sink.write(bytes(chunk))
        self.write_calls += 1
        self.bytes_written += len(chunk)

    def finish(self) -> int:
        """Pad remaining bits with zeros and write out what is left. Returns total bytes."""
        if self._finished:
            return self.bytes_written
        if self._pending.size:
            self._buf += np.packbits(self._pending).tobytes()
            self._pending = np.zeros(0, dtype=np.uint8)
        self._flush_full()
        if self._buf:
            self._emit(self._buf)
            self._buf = bytearray()
        self._finished = True
        return self.bytes_written

def pack_text(text: str, table: CodeTable, sink, buffer_size: int, fold_case: bool = False) -> BitPacker:
    """
    Encode every character of `text` with `table` and write the packed
    bitstream to `sink`. A character without a code raises EncodingError
    (position is its index in the unfolded `text`). Returns the finished packer.
    """
    packer = BitPacker(sink, buffer_size)
    for start in range(0, len(text), TEXT_SLICE):
        packer.write_bits(table.encode(text[start:start + TEXT_SLICE], start=start, fold_case=fold_case))
    packer.finish()
    return packer
