"""
Command line interface for the HFM compressor.
"""

import argparse
import sys

from hfm_coding.container import read_dictionary, read_header
from hfm_coding.errors import HuffmanError
from hfm_coding.hfm_compressor import HuffmanCompressor
from hfm_coding.huffman_builder import build_from_frequencies


def show_info(path: str) -> None:
    """Prints the header and the rebuilt code table of a container."""
    with open(path, "rb") as f:
        header = read_header(f)
        freqs = read_dictionary(f, header.dict_size)
    table = build_from_frequencies(freqs)

    print(f"Version: {header.version}")
    print(f"Original size: {header.original_size} bytes")
    print(f"Distinct symbols: {header.dict_size}")
    print(f"Payload bits: {table.encoded_bit_length()}")
    print(f"{'symbol':>6}  {'frequency':>12}  code")
    for symbol, freq, code in table:
        print(f"{symbol:>6}  {freq:>12}  {code.to01()}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hfm-coding",
        description="Huffman file compressor (HFM container format).",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="print progress while working")
    sub = parser.add_subparsers(dest="command", required=True)

    p_enc = sub.add_parser("encode", help="compress a file")
    p_enc.add_argument("input")
    p_enc.add_argument("output")

    p_dec = sub.add_parser("decode", help="decompress an HFM file")
    p_dec.add_argument("input")
    p_dec.add_argument("output")

    p_info = sub.add_parser("info", help="show header and code table of an HFM file")
    p_info.add_argument("input")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    compressor = HuffmanCompressor(verbose=args.verbose)

    try:
        if args.command == "encode":
            log = compressor.compress_file(args.input, args.output)
            print("File encoded successfully!")
        elif args.command == "decode":
            log = compressor.decompress_file(args.input, args.output)
            print("File decoded successfully!")
        else:
            show_info(args.input)
            return 0
    except (HuffmanError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.verbose:
        print(log)
    return 0


if __name__ == "__main__":
    sys.exit(main())
