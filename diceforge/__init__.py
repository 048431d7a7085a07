from .bigint128 import BigInt128
from .distributions import Continuous, Discrete, UniformContinuous, UniformDiscrete
from .errors import DiceForgeError, ErrorKind, InvalidArgument, OracleError
from .generator import Generator, Pick
from .words import WordWidth

__version__ = '0.1.0'
