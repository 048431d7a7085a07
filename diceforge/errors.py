# diceforge/errors.py

from enum import Enum


class ErrorKind(Enum):
    LENGTH_MISMATCH = 'Lengths of sequence and weight sequence must be equal!'
    EMPTY_SEQUENCE = 'Sequence must have non-zero length!'
    ZERO_WEIGHT = 'Total weight must be positive!'

    @property
    def message(self):
        return self.value


class DiceForgeError(Exception):
    pass


class InvalidArgument(DiceForgeError, ValueError):
    def __init__(self, kind):
        super().__init__(kind.message)
        self.kind = kind


class OracleError(DiceForgeError):
    def __init__(self, status, reason):
        super().__init__(f"oracle returned {status}: {reason}")
        self.status = status
        self.reason = reason
