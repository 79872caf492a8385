"""
Command line entry point: reads a text, compresses it with
Huffman coding, decompresses it back and checks the round trip.
"""
import argparse
import sys
import time

from huffcode.errors import HuffmanError
from huffcode.huffman_coding import HuffmanTree

DEMO_INPUT = "BCAADDDCCACACAC"
FILE_ENCODING = "utf-8"


def read_text(input_f: str) -> str:
    with open(input_f, "r", encoding=FILE_ENCODING) as f:
        return f.read()


def compression_log(text: str, encoded_bits: int) -> str:
    """
    Function builds a short report about the compression.

    :param text: str, original text
    :param encoded_bits: int, length of the encoded bit sequence
    :return: str, information for logging
    """
    original_bits = len(text.encode(FILE_ENCODING)) * 8
    diff = original_bits - encoded_bits
    log = [
        f"Original size: {original_bits} bits",
        f"Encoded size: {encoded_bits} bits",
    ]
    if diff > 0:
        ratio = diff / original_bits * 100
        log.append(f"Size reduced by {diff} bits ({ratio:.1f}% total saving)")
    else:
        log.append(f"Size increased by {-diff} bits")
    return "\n".join(log)


def format_codes(codes: dict) -> str:
    """
    One "symbol<TAB>bits" line per symbol, shortest codes first.
    """
    rows = sorted(codes.items(), key=lambda item: (len(item[1]), item[1].to01()))
    return "\n".join(f"{symbol!r}\t{code.to01()}" for symbol, code in rows)


def run(text: str, show_decoded=False, show_codes=False, verbose=False) -> bool:
    """
    Encodes text, decodes it with the tree built from the same text
    and reports whether the result matches.

    :return: bool, True if the decoded text equals the original
    """
    if verbose:
        print(f"Encoding {len(text)} symbols")
    start = time.perf_counter()
    tree = HuffmanTree(text)
    encoded = tree.encode()
    if verbose:
        print(f"Encoded in {time.perf_counter() - start:.4f}s")
        print(f"Decoding {len(encoded.bits)} bits")

    start = time.perf_counter()
    decoded = encoded.decode_text()
    if verbose:
        print(f"Decoded in {time.perf_counter() - start:.4f}s")

    if show_codes:
        print(format_codes(tree.codes))
    if show_decoded:
        print(decoded)
    if verbose:
        print(compression_log(text, len(encoded.bits)))

    matches = decoded == text
    print(f"Round trip: {'OK' if matches else 'FAILED'}")
    return matches


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huffcode",
        description="Compress a text with Huffman coding and check that it decodes back.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("input_f", nargs="?", help="path to a UTF-8 text file")
    source.add_argument("--text", help="text to compress instead of a file")
    parser.add_argument("--show-decoded", action="store_true", help="print the decoded text")
    parser.add_argument("--show-codes", action="store_true", help="print the code table")
    parser.add_argument("--verbose", action="store_true", help="print timings and sizes")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.input_f is not None:
            text = read_text(args.input_f)
        elif args.text is not None:
            text = args.text
        else:
            text = DEMO_INPUT
        ok = run(text, args.show_decoded, args.show_codes, args.verbose)
    except (HuffmanError, OSError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
