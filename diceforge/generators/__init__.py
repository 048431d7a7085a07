from .bbs import BlumBlumShub
from .hmac_drbg import HmacDrbg
from .linear128 import Linear128
from .xorshift import XorShiftStar

# names accepted by the oracle config and the experiment runner
GENERATORS = {
    'xorshift': XorShiftStar,
    'linear128': Linear128,
    'hmac': HmacDrbg,
    'bbs': BlumBlumShub,
}


def make_generator(name, seed, **kwargs):
    try:
        cls = GENERATORS[name]
    except KeyError:
        raise ValueError(f"unknown generator '{name}', expected one of {sorted(GENERATORS)}") from None
    return cls(seed, **kwargs)
