# diceforge/generators/hmac_drbg.py
# Non-linear RNG: the state is re-derived from an HMAC of itself each step.

import hashlib
import hmac

from ..generator import Generator
from ..words import WordWidth

MASK128 = WordWidth.U128.mask
DEFAULT_KEY = b'demo_hmac_key_16b'


class HmacDrbg(Generator):
    width = WordWidth.U64

    def __init__(self, seed=0, key=None):
        # key: bytes; demo default keeps runs reproducible
        self.key = DEFAULT_KEY if key is None else key
        self.reseed(seed)

    def _hmac_bytes(self, data_bytes):
        return hmac.new(self.key, data_bytes, hashlib.sha256).digest()  # 32 bytes

    def reseed(self, seed):
        self.state = seed & MASK128

    def generate(self):
        mac = self._hmac_bytes(self.state.to_bytes(16, 'big'))
        # next state: first 128 bits of the mac
        self.state = int.from_bytes(mac[:16], 'big') & MASK128
        # output: high 64 bits of the full 256-bit mac
        return int.from_bytes(mac[:8], 'big')
