# diceforge/oracle/app.py
# Flask oracle serving draws from one configured generator.
# Supports SEED_MODE = 'fixed' | 'random' | 'time'

import logging
import math
import os
import time

from flask import Flask, jsonify, request

from . import config
from ..generators import make_generator

MASK128 = (1 << 128) - 1
DEFAULT_SEED = 0x1234567890ABCDEF1234567890ABCDEF

logger = logging.getLogger('diceforge.oracle')


def derive_seed(cfg):
    """
    Derive a 128-bit seed integer according to SEED_MODE.
    Priority:
      - If SEED_MODE == 'fixed' and SEED is int -> use it
      - If SEED_MODE == 'fixed' and SEED is None -> use deterministic default
      - If SEED_MODE == 'random' -> use os.urandom(16)
      - If SEED_MODE == 'time' -> use current time (seconds or ms) expanded into 128 bits
    """
    mode = (cfg.get('SEED_MODE') or 'fixed').lower()
    if mode == 'fixed':
        if cfg.get('SEED') is not None:
            seed = int(cfg['SEED']) & MASK128
            logger.info(f"Using fixed SEED from config: {seed:032x}")
        else:
            seed = DEFAULT_SEED
            logger.info(f"Using default fixed SEED: {seed:032x}")
        return seed
    elif mode == 'random':
        seed = int.from_bytes(os.urandom(16), 'big') & MASK128
        logger.info(f"Using random SEED (os.urandom): {seed:032x}")
        return seed
    elif mode == 'time':
        if cfg.get('TIME_GRANULARITY') == 'ms':
            t = int(time.time() * 1000)
        else:
            t = int(time.time())
        # low-entropy on purpose: time in the high half, constant in the low half
        const = 0xDEADBEEFCAFEBABEDEADBEEFCAFEBABE
        seed = (((t & ((1 << 64) - 1)) << 64) ^ const) & MASK128
        logger.info(f"Using time-derived SEED (granu={cfg.get('TIME_GRANULARITY')}): {seed:032x}")
        return seed
    else:
        seed = DEFAULT_SEED
        logger.warning(f"Unknown SEED_MODE '{cfg.get('SEED_MODE')}', falling back to default SEED: {seed:032x}")
        return seed


def build_generator(cfg):
    name = cfg['GENERATOR']
    kwargs = {}
    if name == 'hmac' and cfg.get('HMAC_KEY') is not None:
        key = cfg['HMAC_KEY']
        kwargs['key'] = key.encode() if isinstance(key, str) else key
    return make_generator(name, derive_seed(cfg), **kwargs)


def parse_int(text):
    # accepts decimal or 0x-prefixed hex, as ints or strings
    if isinstance(text, bool):
        raise ValueError("bool is not an integer")
    if isinstance(text, int):
        return text
    return int(text, 0)


def bad_request(reason):
    return jsonify({'ok': False, 'reason': reason}), 400


def create_app(generator=None, **overrides):
    app = Flask(__name__)
    app.config.from_object(config)
    app.config.update(overrides)

    rng = generator if generator is not None else build_generator(app.config)
    app.extensions['diceforge.generator'] = rng
    logger.info(f"Oracle ready with {type(rng).__name__} ({rng.width.bits}-bit words)")

    def range_args(convert):
        try:
            lo = convert(request.args['min'])
            hi = convert(request.args['max'])
        except KeyError as e:
            raise ValueError(f"missing parameter {e.args[0]}") from None
        if lo > hi:
            raise ValueError("min must not exceed max")
        return lo, hi

    @app.route('/info', methods=['GET'])
    def info():
        return jsonify({'generator': type(rng).__name__, 'width': rng.width.bits})

    @app.route('/get_output', methods=['GET'])
    def get_output():
        out = rng.next()
        return jsonify({'output': format(out, '0{}x'.format(rng.width.hex_digits))})

    @app.route('/unit', methods=['GET'])
    def unit():
        return jsonify({'value': rng.next_unit()})

    @app.route('/range', methods=['GET'])
    def in_range():
        try:
            lo, hi = range_args(parse_int)
        except ValueError as e:
            return bad_request(str(e))
        return jsonify({'value': rng.next_in_range(lo, hi)})

    @app.route('/crange', methods=['GET'])
    def in_crange():
        try:
            lo, hi = range_args(float)
        except ValueError as e:
            return bad_request(str(e))
        # inf or nan bounds (or a span that overflows) would never leave the redraw loop
        if not (math.isfinite(lo) and math.isfinite(hi) and math.isfinite(hi - lo)):
            return bad_request("min and max must be finite")
        return jsonify({'value': rng.next_in_crange(lo, hi)})

    @app.route('/choice', methods=['POST'])
    def choice():
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('sequence'), list):
            return bad_request('need sequence')
        seq = data['sequence']
        weights = data.get('weights')
        if weights is None:
            if not seq:
                return bad_request('sequence must be non-empty')
            return jsonify({'ok': True, 'value': rng.choice(seq)})
        if not isinstance(weights, list) or not all(
                isinstance(w, (int, float)) and not isinstance(w, bool) for w in weights):
            return bad_request('weights must be a list of numbers')
        pick = rng.weighted_pick(seq, weights)
        if pick.error is not None:
            return jsonify({'ok': False, 'reason': pick.error.message, 'kind': pick.error.name}), 400
        return jsonify({'ok': True, 'value': pick.value})

    @app.route('/shuffle', methods=['POST'])
    def shuffle():
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('sequence'), list):
            return bad_request('need sequence')
        seq = list(data['sequence'])
        rng.shuffle(seq)
        return jsonify({'ok': True, 'sequence': seq})

    @app.route('/reset', methods=['POST'])
    def reset():
        data = request.get_json(silent=True)
        if not data or 'seed' not in data:
            return bad_request('need seed')
        try:
            seed = parse_int(data['seed'])
        except (TypeError, ValueError):
            return bad_request('bad seed')
        rng.reset_seed(seed)
        logger.info(f"Generator reseeded: {seed:#x}")
        return jsonify({'ok': True})

    return app


def main():
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
    app = create_app()
    logger.info(f"Starting oracle at http://{config.HOST}:{config.PORT} with SEED_MODE={config.SEED_MODE}")
    app.run(host=config.HOST, port=config.PORT, debug=False)


if __name__ == '__main__':
    main()
