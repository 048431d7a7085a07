# diceforge/generators/xorshift.py
# xorshift* with 64-bit state and 32-bit output:
# https://en.wikipedia.org/wiki/Xorshift#xorshift*

from ..generator import Generator
from ..words import WordWidth

MASK64 = WordWidth.U64.mask
MULTIPLIER = 0x2545F4914F6CDD1D
# golden-ratio constant, stands in for a zero seed (zero state never leaves 0)
ZERO_SEED_STATE = 0x9E3779B97F4A7C15


class XorShiftStar(Generator):
    width = WordWidth.U32

    def __init__(self, seed=1337):
        self.reseed(seed)

    def reseed(self, seed):
        self.state = (seed & MASK64) or ZERO_SEED_STATE

    def generate(self):
        # doing & MASK64 is the same as a cast to uint64 in C
        self.state ^= (self.state >> 12) & MASK64
        self.state ^= (self.state << 25) & MASK64
        self.state ^= (self.state >> 27) & MASK64
        return ((self.state * MULTIPLIER) >> 32) & 0xFFFFFFFF
