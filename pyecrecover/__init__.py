import pyecrecover.codec
import pyecrecover.config
import pyecrecover.core
import pyecrecover.ecdsa
import pyecrecover.error
import pyecrecover.log
import pyecrecover.objectdict
import pyecrecover.secp256k1
