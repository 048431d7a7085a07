# diceforge/client.py
# Thin requests client for the oracle service, plus a Generator that draws its
# raw words from a running oracle.

import requests

from .errors import OracleError
from .generator import Generator
from .words import WordWidth

ORACLE = 'http://127.0.0.1:5000'


class OracleClient:
    def __init__(self, base_url=ORACLE, session=None, timeout=5):
        self.base_url = base_url.rstrip('/')
        self.session = requests.Session() if session is None else session
        self.timeout = timeout

    def _check(self, r):
        if r.status_code != 200:
            try:
                reason = r.json().get('reason', r.text)
            except ValueError:
                reason = r.text
            raise OracleError(r.status_code, reason)
        return r.json()

    def _get(self, path, params=None):
        r = self.session.get(self.base_url + path, params=params, timeout=self.timeout)
        return self._check(r)

    def _post(self, path, payload):
        r = self.session.post(self.base_url + path, json=payload, timeout=self.timeout)
        return self._check(r)

    def info(self):
        return self._get('/info')

    def get_output(self):
        return int(self._get('/get_output')['output'], 16)

    def unit(self):
        return self._get('/unit')['value']

    def in_range(self, lo, hi):
        return self._get('/range', {'min': lo, 'max': hi})['value']

    def in_crange(self, lo, hi):
        return self._get('/crange', {'min': repr(float(lo)), 'max': repr(float(hi))})['value']

    def choice(self, sequence, weights=None):
        payload = {'sequence': list(sequence)}
        if weights is not None:
            payload['weights'] = list(weights)
        return self._post('/choice', payload)['value']

    def shuffle(self, sequence):
        return self._post('/shuffle', {'sequence': list(sequence)})['sequence']

    def reset(self, seed):
        self._post('/reset', {'seed': hex(seed)})


class RemoteGenerator(Generator):
    """Uses a running oracle as the raw-entropy source; all sampling happens locally."""

    def __init__(self, client):
        self.client = client
        self.width = WordWidth(client.info()['width'])

    def generate(self):
        return self.client.get_output()

    def reseed(self, seed):
        self.client.reset(seed)
