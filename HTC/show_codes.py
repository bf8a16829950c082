import argparse

from alphabet import LOWERCASE
from freq_count import count_frequencies, read_text
from huff_codes import build_code_table

def main(argv=None):
    ap = argparse.ArgumentParser(description="print the Huffman code table for a text file")
    ap.add_argument("input", help="path to the input text")
    ap.add_argument("--alphabet", default="".join(LOWERCASE), help="ordered symbols (default a-z)")
    ap.add_argument("--no-fold-case", dest="fold_case", action="store_false")
    ap.add_argument("--count-delimiters", action="store_true")
    args = ap.parse_args(argv)

    freqs = count_frequencies(read_text(args.input), fold_case=args.fold_case,
                              count_delimiters=args.count_delimiters)
    table = build_code_table(freqs, tuple(args.alphabet))
    print("Huffman encoding:")
    print(table, end="")
    return 0

if __name__ == "__main__":
    main()
