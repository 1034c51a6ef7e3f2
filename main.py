import logging
import pyecrecover

logging.basicConfig(level=logging.DEBUG)

# A signature made by private key sha256('foo') over hash e.
e = 0xfcde2b2edba56bf408601fb721fe9b5c338d10ee429ea04fae5511b68fbf8fb9
r = 73822833206246044331228008262087004113076292229679808334250850393445001014761
s = 58995174607243353628346858794753620798088291196940745194581481841927132845752

for v in [0, 1]:
    pubkey = pyecrecover.core.recover_public_key(e, r, s, v)
    print(v, pubkey.hex())
