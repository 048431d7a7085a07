import pytest

from diceforge.generators import BlumBlumShub, HmacDrbg, XorShiftStar
from diceforge.generators.bbs import MODULUS
from diceforge.oracle import app as oracle_app
from diceforge.oracle.app import create_app, derive_seed, MASK128


@pytest.fixture
def client():
    app = create_app(generator=XorShiftStar(5))
    app.testing = True
    return app.test_client()


def test_info_reports_generator_and_width(client):
    r = client.get('/info')
    assert r.status_code == 200
    assert r.get_json() == {'generator': 'XorShiftStar', 'width': 32}


def test_get_output_is_padded_hex_of_raw_word(client):
    expected = XorShiftStar(5).next()
    out = client.get('/get_output').get_json()['output']
    assert len(out) == 8
    assert int(out, 16) == expected


def test_unit_and_range(client):
    assert 0.0 <= client.get('/unit').get_json()['value'] < 1.0
    for _ in range(50):
        v = client.get('/range', query_string={'min': -3, 'max': 3}).get_json()['value']
        assert -3 <= v <= 3


def test_range_accepts_hex_bounds(client):
    v = client.get('/range', query_string={'min': '0x10', 'max': '0x20'}).get_json()['value']
    assert 16 <= v <= 32


@pytest.mark.parametrize('params', [{'min': 1}, {'min': 'x', 'max': 2}, {'min': 5, 'max': 1}])
def test_range_rejects_bad_params(client, params):
    r = client.get('/range', query_string=params)
    assert r.status_code == 400
    assert r.get_json()['ok'] is False


def test_crange(client):
    v = client.get('/crange', query_string={'min': 1.5, 'max': 2.5}).get_json()['value']
    assert 1.5 <= v < 2.5
    assert client.get('/crange', query_string={'min': 3, 'max': 2}).status_code == 400


def test_choice_uniform_and_weighted(client):
    r = client.post('/choice', json={'sequence': ['a', 'b', 'c']})
    assert r.get_json()['value'] in ('a', 'b', 'c')
    for _ in range(20):
        r = client.post('/choice', json={'sequence': ['a', 'b', 'c'], 'weights': [0, 1, 0]})
        assert r.get_json() == {'ok': True, 'value': 'b'}


def test_choice_length_mismatch_is_400(client):
    r = client.post('/choice', json={'sequence': [1, 2, 3], 'weights': [1, 1]})
    assert r.status_code == 400
    body = r.get_json()
    assert body['ok'] is False
    assert body['kind'] == 'LENGTH_MISMATCH'


@pytest.mark.parametrize('payload', [None, {}, {'sequence': []}, {'sequence': [1], 'weights': ['x']}])
def test_choice_rejects_bad_payload(client, payload):
    r = client.post('/choice', json=payload)
    assert r.status_code == 400


def test_shuffle_preserves_items(client):
    r = client.post('/shuffle', json={'sequence': [1, 2, 3, 4, 5]})
    assert sorted(r.get_json()['sequence']) == [1, 2, 3, 4, 5]


def test_reset_reproduces_sequence(client):
    assert client.post('/reset', json={'seed': '0x2a'}).get_json() == {'ok': True}
    first = [client.get('/get_output').get_json()['output'] for _ in range(5)]
    client.post('/reset', json={'seed': 42})
    again = [client.get('/get_output').get_json()['output'] for _ in range(5)]
    assert first == again
    assert client.post('/reset', json={'seed': 'zz'}).status_code == 400
    assert client.post('/reset', json={}).status_code == 400


def test_create_app_builds_generator_from_config():
    app = create_app(GENERATOR='bbs', SEED=99, SEED_MODE='fixed')
    assert isinstance(app.extensions['diceforge.generator'], BlumBlumShub)


def test_create_app_hmac_key_from_config():
    app = create_app(GENERATOR='hmac', HMAC_KEY='secret-key')
    rng = app.extensions['diceforge.generator']
    assert isinstance(rng, HmacDrbg)
    assert rng.key == b'secret-key'


def test_derive_seed_fixed_modes():
    assert derive_seed({'SEED_MODE': 'fixed', 'SEED': 7}) == 7
    assert derive_seed({'SEED_MODE': 'fixed', 'SEED': None}) == oracle_app.DEFAULT_SEED
    assert derive_seed({'SEED_MODE': 'bogus'}) == oracle_app.DEFAULT_SEED


def test_derive_seed_random_mode():
    seed = derive_seed({'SEED_MODE': 'random'})
    assert 0 <= seed <= MASK128


def test_derive_seed_time_mode(monkeypatch):
    monkeypatch.setattr(oracle_app.time, 'time', lambda: 1000.5)
    const = 0xDEADBEEFCAFEBABEDEADBEEFCAFEBABE
    assert derive_seed({'SEED_MODE': 'time', 'TIME_GRANULARITY': 's'}) == ((1000 << 64) ^ const) & MASK128
    assert derive_seed({'SEED_MODE': 'time', 'TIME_GRANULARITY': 'ms'}) == ((1000500 << 64) ^ const) & MASK128


@pytest.mark.parametrize('params', [
    {'min': 0, 'max': 'inf'},
    {'min': '-inf', 'max': 0},
    {'min': 'nan', 'max': 'nan'},
    {'min': -1e308, 'max': 1e308},
])
def test_crange_rejects_non_finite_bounds(client, params):
    r = client.get('/crange', query_string=params)
    assert r.status_code == 400
    assert r.get_json()['ok'] is False


def test_reset_to_bbs_square_root_of_one_keeps_serving():
    app = create_app(GENERATOR='bbs', SEED=3)
    c = app.test_client()
    assert c.post('/reset', json={'seed': MODULUS - 1}).status_code == 200
    assert 0.0 <= c.get('/unit').get_json()['value'] < 1.0
