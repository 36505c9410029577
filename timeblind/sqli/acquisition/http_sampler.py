# http_sampler.py
# live observations: every observation is how long one GET to the target took
# one sampler per group, e.g. the reference one sends a benign value and the
# candidate one sends the delay payload in the same parameter

import logging
import requests

from ..config import load_configuration
from ..errors import AcquisitionError
from ..timing_analysis import measure_response_time
from .sampler import Sampler

logger = logging.getLogger("TimeBlind")


class HttpSampler(Sampler):
    def __init__(self, url, params=None, session=None, timeout=None, name=None):
        self.url = url
        self.params = dict(params or {})
        self.session = session or requests.Session()
        if timeout is None:
            timeout = load_configuration()["http"]["timeout"]
        self.timeout = timeout
        self.name = name or f"http:{url}"

    def _acquire(self, n):
        observations = []
        for _ in range(n):
            try:
                response, elapsed = measure_response_time(
                    self.session.get, self.url, params=self.params, timeout=self.timeout
                )
            except requests.RequestException as e:
                raise AcquisitionError(f"{self.name}: request failed: {e}") from e

            # a delay payload often ends in a 500 when the db call times out,
            # the latency is still what we are after
            if response.status_code != 200:
                logger.warning("[-] %s returned status code %d", self.name, response.status_code)

            logger.debug("%s: %.4fs (status %d)", self.name, elapsed, response.status_code)
            observations.append(elapsed)
        return observations
