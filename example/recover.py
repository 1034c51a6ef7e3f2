import argparse
import logging
import pyecrecover

# Recover the public key from a message hash and a signature. Numbers are 32 bytes each, hex or base32.

parser = argparse.ArgumentParser()
parser.add_argument('--encoding', type=str, choices=['hex', 'base32'], default='hex')
parser.add_argument('--hash', type=str, help='message hash')
parser.add_argument('--r', type=str, help='signature r')
parser.add_argument('--s', type=str, help='signature s')
parser.add_argument('--v', type=int, default=0, help='recovery id')
parser.add_argument('--verbose', action='store_true')
args = parser.parse_args()

if args.verbose:
    logging.basicConfig(level=logging.DEBUG)

print(pyecrecover.codec.recover_public_key_text(args.hash, args.r, args.s, args.v, args.encoding))
