# diceforge/oracle/config.py
# Configuration for the oracle (RNG service)

# Network config
HOST = '127.0.0.1'
PORT = 5000

# Which generator backs the service: 'xorshift' | 'linear128' | 'hmac' | 'bbs'
GENERATOR = 'xorshift'

# Seed configuration:
# - SEED_MODE:
#     'fixed'  : use the integer in SEED (if SEED is None, falls back to deterministic constant)
#     'random' : use os.urandom(16) at startup (non-deterministic each run)
#     'time'   : use current unix time (int(time.time())) as seed - low entropy (for demo)
SEED_MODE = 'fixed'   # 'fixed' | 'random' | 'time'

# If SEED_MODE == 'fixed', use this SEED (128-bit integer).
# If None, a default deterministic 128-bit constant will be used.
SEED = 0x1234567890ABCDEF1234567890ABCDEF  # or None

# If SEED_MODE == 'time', this controls whether we use seconds or milliseconds.
# 's' -> int(time.time()), 'ms' -> int(time.time() * 1000)
TIME_GRANULARITY = 's'  # 's' or 'ms'

# Key for the 'hmac' generator. None -> built-in demo key.
HMAC_KEY = None

# Logging level
LOG_LEVEL = 'INFO'
