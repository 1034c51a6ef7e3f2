import argparse
import pyecrecover

# Calculate public key from private key.

parser = argparse.ArgumentParser()
parser.add_argument('--prikey', type=str, help='private key')
args = parser.parse_args()

prikey = pyecrecover.core.PriKey(int(args.prikey, 0))
pubkey = prikey.pubkey()
print(f'pubkey = {pubkey.hex()}')
print(f'   sec = {pubkey.sec().hex()}')
