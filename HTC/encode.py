import argparse

from alphabet import DEFAULT_ALPHABET
from codec_core import CodecConfig, compress_file
from metrics import average_code_length, compression_ratio, entropy_bits

def positive_int(s: str) -> int:
    try:
        v = int(s.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"buffer size must be an integer, got {s!r}") from None
    if v < 1:
        raise argparse.ArgumentTypeError(f"buffer size must be positive, got {v}")
    return v

def build_parser():
    ap = argparse.ArgumentParser(description="Huffman-pack a text file (no header, not decodable on its own)")
    ap.add_argument("buffer_size", type=positive_int, help="bytes per write to the output file")
    ap.add_argument("input", help="path to the input text")
    ap.add_argument("output", help="path to the packed output")
    ap.add_argument("--alphabet", default="".join(DEFAULT_ALPHABET),
                    help="ordered symbols to build codes for (default a-z and space)")
    ap.add_argument("--no-fold-case", dest="fold_case", action="store_false",
                    help="keep case when counting and packing")
    ap.add_argument("--count-delimiters", action="store_true",
                    help="count spaces and newlines too")
    ap.add_argument("--show-codes", action="store_true", help="print the code table")
    return ap

def main(argv=None):
    args = build_parser().parse_args(argv)
    config = CodecConfig(
        alphabet=tuple(args.alphabet),
        buffer_size=args.buffer_size,
        fold_case=args.fold_case,
        count_delimiters=args.count_delimiters,
    )

    report = compress_file(args.input, args.output, config)

    print("[encode] generated Huffman code")
    if args.show_codes:
        print(report.table, end="")
    print(f"[encode] wrote {args.output}")
    print(f"[encode] chars={report.input_chars}, bits={report.bits}, "
          f"bytes={report.output_bytes}, writes={report.write_calls}")
    print(f"[encode] entropy={entropy_bits(report.freqs, config.alphabet):.4f} b/sym, "
          f"avg_code={average_code_length(report.freqs, report.table):.4f} b/sym, "
          f"ratio={compression_ratio(report.input_bytes, report.output_bytes):.3f}")
    return 0

if __name__ == "__main__":
    main()
