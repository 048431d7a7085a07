# diceforge/generators/linear128.py
# 128-bit linear RNG.
# State: single 128-bit integer.
# Update: linear transform over GF(2) using XORs, shifts and rotate (all linear w.r.t bits).

import logging

from ..generator import Generator
from ..words import WordWidth

MASK128 = WordWidth.U128.mask
DEFAULT_SEED = 0x1234567890ABCDEF1234567890ABCDEF

logger = logging.getLogger('diceforge.generators')


def rotl(x, r, bits=128):
    r %= bits
    return ((x << r) & ((1 << bits) - 1)) | (x >> (bits - r))


def advance(s):
    t = s
    t ^= ((s << 7) & MASK128)
    t ^= (s >> 13)
    t ^= rotl(s, 37)
    return t & MASK128


class Linear128(Generator):
    width = WordWidth.U128

    def __init__(self, seed=DEFAULT_SEED):
        self.reseed(seed)

    def reseed(self, seed):
        state = seed & MASK128
        if state == 0:
            # the all-zero state is a fixed point of the transform
            logger.warning("Linear128 seed reduces to 0, using default seed %032x", DEFAULT_SEED)
            state = DEFAULT_SEED
        self.state = state

    def generate(self):
        self.state = advance(self.state)
        return self.state

    def peek_next(self):
        # next value without consuming it
        return advance(self.state)
