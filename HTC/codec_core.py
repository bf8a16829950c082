from collections import Counter
from dataclasses import dataclass
from typing import Tuple

from alphabet import DEFAULT_ALPHABET, parse_alphabet
from bitpack import pack_text
from freq_count import count_frequencies, read_text
from huff_codes import CodeTable, build_code_table

@dataclass(frozen=True)
class CodecConfig:
    alphabet: Tuple[str, ...] = DEFAULT_ALPHABET
    buffer_size: int = 4096
    # one case policy for both counting and packing
    fold_case: bool = True
    count_delimiters: bool = False

    def __post_init__(self):
        object.__setattr__(self, "alphabet", parse_alphabet(self.alphabet))
        if self.buffer_size < 1:
            raise ValueError(f"buffer_size must be a positive integer, got {self.buffer_size}")

@dataclass(frozen=True)
class EncodeReport:
    freqs: Counter
    table: CodeTable
    input_chars: int
    input_bytes: int
    bits: int
    output_bytes: int
    write_calls: int

def compress_text(text: str, sink, config: CodecConfig) -> EncodeReport:
    """
    text -> frequencies -> tree -> code table -> packed bytes written to sink.
    """
    freqs = count_frequencies(text, fold_case=config.fold_case,
                              count_delimiters=config.count_delimiters)
    table = build_code_table(freqs, config.alphabet)
    packer = pack_text(text, table, sink, config.buffer_size, fold_case=config.fold_case)
    return EncodeReport(
        freqs=freqs,
        table=table,
        input_chars=len(text),
        input_bytes=len(text.encode("utf-8")),
        bits=packer.bits_written,
        output_bytes=packer.bytes_written,
        write_calls=packer.write_calls,
    )

def compress_file(input_path, output_path, config: CodecConfig) -> EncodeReport:
    text = read_text(input_path)
    with open(output_path, "wb") as f:
        return compress_text(text, f, config)
