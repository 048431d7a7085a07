# diceforge/bigint128.py
# Fixed-width unsigned 128-bit integer for exact modular squaring.
# Four 32-bit limbs, least-significant first, kept in 64-bit-sized slots so a
# partial product plus carry always fits while it is being folded.

import sys

_2_32 = 1 << 32
MASK32 = _2_32 - 1


class BigInt128:
    """
    Unsigned integer in [0, 2**128) stored as four 32-bit limbs.

    Used by modular-recurrence generators (state = state**2 mod n): square()
    then mod(n) advances the state exactly for any n < 2**64.
    """

    __slots__ = ('data',)

    def __init__(self, d0=0, d1=0, d2=0, d3=0):
        self.data = [d0, d1, d2, d3]

    @classmethod
    def from_int(cls, value):
        return cls(value & MASK32, (value >> 32) & MASK32,
                   (value >> 64) & MASK32, (value >> 96) & MASK32)

    def __int__(self):
        d = self.data
        return d[0] | (d[1] << 32) | (d[2] << 64) | (d[3] << 96)

    def __eq__(self, other):
        if not isinstance(other, BigInt128):
            return NotImplemented
        return self.data == other.data

    def __repr__(self):
        return 'BigInt128(%d, %d, %d, %d)' % tuple(self.data)

    def square(self):
        """Replace the value with (value * value) mod 2**128."""
        product = [0] * 8
        data = self.data
        for i in range(4):
            for j in range(4):
                product[i + j] += data[i] * data[j]
                # fold everything above 32 bits into the next limb
                product[i + j + 1] += product[i + j] >> 32
                product[i + j] &= MASK32
        for i in range(4):
            data[i] = product[i] & MASK32

    def mod(self, n):
        """Reduce the value modulo a 64-bit n > 0. Result lives in limbs 0 and 1."""
        data = self.data
        p1, p2 = n >> 32, n & MASK32
        if data[3] > 0 or data[2] > 0 or data[1] > p1 or (data[1] == p1 and data[0] >= p2):
            # Horner from the most significant limb; res < n keeps res * 2**32 in 96 bits
            res = 0
            for i in range(3, -1, -1):
                res = ((res * _2_32) % n + data[i] % n) % n
            data[3] = 0
            data[2] = 0
            data[1] = res >> 32
            data[0] = res & MASK32

    def print(self, file=None):
        file = sys.stdout if file is None else file
        print(' '.join(str(d) for d in reversed(self.data)), file=file)
