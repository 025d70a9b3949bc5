import argparse
import sys

from mtp.attacks.many_time_pad import MARKER, recover
from mtp.data.importer import load, Res
from mtp.utils import unhex, DecodeError


def build_parser():
    parser = argparse.ArgumentParser(
        prog='mtp',
        description="Recover key and plaintext bytes from hex ciphertexts encrypted with the same XOR key."
    )
    parser.add_argument(
        'ciphertexts', nargs='*', metavar='HEX',
        help="hex encoded ciphertexts (default: the packaged ciphertext set)"
    )
    parser.add_argument(
        '--marker', type=int, default=MARKER,
        help=f"detection threshold and reveal value (default: {MARKER})"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    literals = args.ciphertexts or load(Res.MTP_ciphertexts_1)
    try:
        ciphertexts = [unhex(h) for h in literals]
    except DecodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(recover(ciphertexts, marker=args.marker).render())
    return 0


if __name__ == '__main__':
    sys.exit(main())
