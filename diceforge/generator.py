# diceforge/generator.py
# Generic sampling layer. A concrete RNG only implements generate() and reseed();
# every derived draw (unit reals, ranges, choice, shuffle) lives here once.

import logging
import math
from abc import ABC, abstractmethod
from bisect import bisect_left, bisect_right
from collections import namedtuple
from itertools import accumulate

from .errors import ErrorKind, InvalidArgument
from .words import WordWidth

logger = logging.getLogger('diceforge.generator')

# Result of a weighted pick: exactly one of value / error is meaningful.
Pick = namedtuple('Pick', ['value', 'error'])


class Generator(ABC):
    """
    Base class for every RNG in diceforge.

    Subclasses set `width` to the WordWidth of their raw output and implement
    generate() (one raw word) and reseed(seed) (replace all internal state).
    """

    width = WordWidth.U64

    @abstractmethod
    def generate(self):
        """Return one raw word in [0, width.max]."""

    @abstractmethod
    def reseed(self, seed):
        """Re-initialize all internal state from seed."""

    def next(self):
        return self.generate()

    def next_unit(self):
        """Random real in [0, 1). A draw of exactly 1.0 is rejected and redrawn."""
        top = float(self.width.max)
        x = 1.0
        while x == 1.0:
            x = self.generate() / top
        return x

    def next_in_range(self, min, max):
        """
        Random integer in [min, max], both inclusive. Requires min <= max.

        The result is an exact int whatever the word width; float rounding on
        very wide spans is clamped back to max.
        """
        x = math.floor(self.next_unit() * (max - min + 1)) + min
        return x if x <= max else max

    def next_in_crange(self, min, max):
        """
        Random real in [min, max); max itself is never returned.

        An empty interval (min >= max) returns min without drawing.
        """
        if min >= max:
            return min
        x = max
        while x >= max:
            x = (max - min) * self.next_unit() + min
        return x

    def reset_seed(self, seed):
        logger.debug("reseeding %s with %r", type(self).__name__, seed)
        self.reseed(seed)

    def choice(self, seq, weights=None):
        """
        Pick one element of a non-empty sequence.

        Without weights every element is equally likely. With weights the
        probability of seq[i] is proportional to weights[i]; mismatched lengths
        or an empty sequence raise InvalidArgument before anything is drawn.
        """
        if weights is None:
            return seq[self.next_in_range(0, len(seq) - 1)]
        pick = self.weighted_pick(seq, weights)
        if pick.error is not None:
            raise InvalidArgument(pick.error)
        return pick.value

    def weighted_pick(self, seq, weights):
        # inverse-cdf search over the running sums of the weights
        if len(seq) != len(weights):
            return Pick(None, ErrorKind.LENGTH_MISMATCH)
        if len(seq) == 0:
            return Pick(None, ErrorKind.EMPTY_SEQUENCE)
        cumulative = list(accumulate(weights))
        total = cumulative[-1]
        if not total > 0:
            return Pick(None, ErrorKind.ZERO_WEIGHT)
        i = bisect_right(cumulative, self.next_unit() * total)
        if i == len(cumulative):
            # product rounded up to the total
            i = bisect_left(cumulative, total)
        return Pick(seq[i], None)

    def shuffle(self, seq):
        """Fisher-Yates shuffle of a mutable sequence, in place."""
        n = len(seq)
        for i in range(n):
            j = i + self.next_in_range(0, n - i - 1)
            seq[i], seq[j] = seq[j], seq[i]
