# diceforge/generators/bbs.py
# Blum Blum Shub: x <- x**2 mod n, one output bit (the parity of x) per step.
# Each step goes through BigInt128 so x**2 never has to fit a machine word.

import math

from ..bigint128 import BigInt128
from ..generator import Generator
from ..words import WordWidth

# Blum primes (both = 3 mod 4) just below 2**32, so n < 2**64
P = 4294967291
Q = 4294967279
MODULUS = P * Q


class BlumBlumShub(Generator):
    width = WordWidth.U32

    def __init__(self, seed=0x2545F491, modulus=MODULUS):
        if not 3 < modulus < (1 << 64):
            raise ValueError("modulus must be in (3, 2**64)")
        self.modulus = modulus
        self.reseed(seed)

    def reseed(self, seed):
        x = seed % self.modulus
        while True:
            # x must be coprime to n, and x**2 must not be 1 (a square root of 1
            # would pin the state at the fixed point 1)
            if x >= 2 and math.gcd(x, self.modulus) == 1:
                self.state = x
                if self.step() > 1:
                    return
            x = (x + 1) % self.modulus

    def step(self):
        b = BigInt128.from_int(self.state)
        b.square()
        b.mod(self.modulus)
        self.state = int(b)
        return self.state

    def generate(self):
        word = 0
        for _ in range(self.width.bits):
            word = (word << 1) | (self.step() & 1)
        return word
