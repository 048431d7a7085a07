# diceforge/distributions.py
# Analytic contracts for probability distributions, plus the uniform ones
# the uniformity experiments compare against.

import math
from abc import ABC, abstractmethod


class Continuous(ABC):
    """
    A distribution over a real-valued random variable.

    Implementations must keep cdf non-decreasing, 0 at min_value() and 1 at
    max_value(), and pdf integrating to 1 over [min_value(), max_value()].
    """

    @abstractmethod
    def variance(self):
        """Theoretical variance."""

    @abstractmethod
    def expectation(self):
        """Theoretical mean."""

    @abstractmethod
    def min_value(self):
        """Smallest value the variable can take (may be -inf)."""

    @abstractmethod
    def max_value(self):
        """Largest value the variable can take (may be inf)."""

    @abstractmethod
    def pdf(self, x):
        """Probability density at x."""

    @abstractmethod
    def cdf(self, x):
        """P(X <= x)."""


class Discrete(ABC):
    """
    A distribution over an integer-valued random variable.

    Same guarantees as Continuous, with pmf summing to 1 over the integers in
    [min_value(), max_value()].
    """

    @abstractmethod
    def variance(self):
        """Theoretical variance."""

    @abstractmethod
    def expectation(self):
        """Theoretical mean."""

    @abstractmethod
    def min_value(self):
        """Smallest integer in the support."""

    @abstractmethod
    def max_value(self):
        """Largest integer in the support."""

    @abstractmethod
    def pmf(self, k):
        """P(X = k)."""

    @abstractmethod
    def cdf(self, k):
        """P(X <= k)."""


class UniformContinuous(Continuous):
    def __init__(self, a, b):
        if not a < b:
            raise ValueError("need a < b")
        self.a = float(a)
        self.b = float(b)

    def variance(self):
        return (self.b - self.a) ** 2 / 12.0

    def expectation(self):
        return (self.a + self.b) / 2.0

    def min_value(self):
        return self.a

    def max_value(self):
        return self.b

    def pdf(self, x):
        if self.a <= x <= self.b:
            return 1.0 / (self.b - self.a)
        return 0.0

    def cdf(self, x):
        if x <= self.a:
            return 0.0
        if x >= self.b:
            return 1.0
        return (x - self.a) / (self.b - self.a)

    def sample(self, generator):
        return generator.next_in_crange(self.a, self.b)


class UniformDiscrete(Discrete):
    # every integer in [a, b] equally likely
    def __init__(self, a, b):
        if a > b:
            raise ValueError("need a <= b")
        self.a = int(a)
        self.b = int(b)
        self.n = self.b - self.a + 1

    def variance(self):
        return (self.n ** 2 - 1) / 12.0

    def expectation(self):
        return (self.a + self.b) / 2.0

    def min_value(self):
        return self.a

    def max_value(self):
        return self.b

    def pmf(self, k):
        if not (isinstance(k, int) or float(k).is_integer()):
            return 0.0
        if self.a <= k <= self.b:
            return 1.0 / self.n
        return 0.0

    def cdf(self, k):
        if k < self.a:
            return 0.0
        if k >= self.b:
            return 1.0
        return (math.floor(k) - self.a + 1) / self.n

    def sample(self, generator):
        return generator.next_in_range(self.a, self.b)
