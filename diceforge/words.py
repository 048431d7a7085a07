# diceforge/words.py
# Supported raw-word widths. A concrete generator picks one as its `width`.

from enum import Enum


class WordWidth(Enum):
    U32 = 32
    U64 = 64
    U128 = 128

    @property
    def bits(self):
        return self.value

    @property
    def mask(self):
        return (1 << self.value) - 1

    @property
    def max(self):
        # largest raw word; next_unit() divides by this
        return self.mask

    @property
    def hex_digits(self):
        return self.value // 4
