from urllib.parse import urlsplit

import pytest

from diceforge.client import OracleClient, RemoteGenerator
from diceforge.errors import OracleError
from diceforge.generators import XorShiftStar
from diceforge.oracle.app import create_app
from diceforge.words import WordWidth


class _Response:
    def __init__(self, resp):
        self.status_code = resp.status_code
        self.text = resp.get_data(as_text=True)
        self._json = resp.get_json(silent=True)

    def json(self):
        if self._json is None:
            raise ValueError('no json')
        return self._json


class FlaskSession:
    """Routes requests-style calls into a Flask test client."""

    def __init__(self, app):
        self.client = app.test_client()

    def get(self, url, params=None, timeout=None):
        return _Response(self.client.get(urlsplit(url).path, query_string=params))

    def post(self, url, json=None, timeout=None):
        return _Response(self.client.post(urlsplit(url).path, json=json))


def _mk_client(seed=0):
    app = create_app(generator=XorShiftStar(seed))
    return OracleClient('http://oracle.test/', session=FlaskSession(app))


def test_client_round_trips_each_route():
    c = _mk_client()
    assert c.info() == {'generator': 'XorShiftStar', 'width': 32}
    assert 0 <= c.get_output() <= 0xFFFFFFFF
    assert 0.0 <= c.unit() < 1.0
    assert 10 <= c.in_range(10, 12) <= 12
    assert 0.0 <= c.in_crange(0, 0.5) < 0.5
    assert c.choice('xyz') in list('xyz')
    assert c.choice([1, 2], weights=[0, 5]) == 2
    assert sorted(c.shuffle([3, 1, 2])) == [1, 2, 3]


def test_client_raises_oracle_error_with_reason():
    c = _mk_client()
    with pytest.raises(OracleError) as exc:
        c.choice([1, 2, 3], weights=[1])
    assert exc.value.status == 400
    assert 'equal' in exc.value.reason


def test_remote_generator_matches_local_draws():
    remote = RemoteGenerator(_mk_client(seed=0))
    assert remote.width is WordWidth.U32
    remote.reset_seed(9)
    local = XorShiftStar(9)
    assert [remote.next_unit() for _ in range(5)] == [local.next_unit() for _ in range(5)]
    assert [remote.next_in_range(1, 6) for _ in range(10)] == [local.next_in_range(1, 6) for _ in range(10)]
    seq_remote, seq_local = list(range(8)), list(range(8))
    remote.shuffle(seq_remote)
    local.shuffle(seq_local)
    assert seq_remote == seq_local
