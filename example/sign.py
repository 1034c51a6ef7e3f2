import argparse
import pyecrecover

# Sign the sha256 hash of a message and print everything recover.py needs.

parser = argparse.ArgumentParser()
parser.add_argument('--prikey', type=str, help='private key')
parser.add_argument('--data', type=str, help='message')
args = parser.parse_args()

prikey = pyecrecover.core.PriKey(int(args.prikey, 0))
data = pyecrecover.core.hash(args.data.encode())
sig = prikey.sign(data)
print(f'hash = {data.hex()}')
print(f'   r = {sig[0x00:0x20].hex()}')
print(f'   s = {sig[0x20:0x40].hex()}')
print(f'   v = {sig[0x40]}')
print(f' key = {prikey.pubkey().hex()}')
