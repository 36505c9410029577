# browser_sampler.py
# live observations through a real browser, for targets that only take input
# through a form. the payload is typed in before the clock starts; each
# observation = time from submitting the form until the response page has a
# <body>. webdriver click blocks until a navigation it started has loaded, so
# the delay lands inside the measurement

import logging
from selenium.webdriver.common.by import By
from selenium.webdriver.support.ui import WebDriverWait
from selenium.webdriver.support import expected_conditions as EC
from selenium.common.exceptions import WebDriverException

from ..errors import AcquisitionError
from ..injection import launch_new_browser, safe_get, fill_payload, submit_form
from ..timing_analysis import measure_response_time
from .sampler import Sampler

logger = logging.getLogger("TimeBlind")


class BrowserSampler(Sampler):
    def __init__(self, driver, url, payload, wait, name=None):
        self.driver = driver
        self.url = url
        self.payload = payload
        self.wait = wait  # WebDriverWait bound to the same driver
        self.name = name or f"browser:{payload}"

    @classmethod
    def launch(cls, url, payload, headless=True, wait_timeout=15, name=None):
        """
        Starts its own Chrome instance and returns a sampler driving it.
        Call close() when done sampling.
        """
        driver = launch_new_browser(headless=headless)
        return cls(driver, url, payload, WebDriverWait(driver, wait_timeout), name=name)

    def close(self):
        self.driver.quit()

    def _wait_for_body(self):
        self.wait.until(EC.presence_of_element_located((By.TAG_NAME, "body")))

    def _submit(self, inputs):
        submit_form(self.driver, inputs)
        self._wait_for_body()

    def _acquire(self, n):
        observations = []
        for _ in range(n):
            # fresh page and no cookies so earlier submissions can't skew the timing
            self.driver.delete_all_cookies()
            if not safe_get(self.driver, self.url):
                raise AcquisitionError(f"{self.name}: could not load {self.url}")
            self._wait_for_body()

            try:
                # typing time grows with payload length, keep it off the clock
                inputs = fill_payload(self.driver, self.payload)
                _, elapsed = measure_response_time(self._submit, inputs)
            except WebDriverException as e:
                raise AcquisitionError(f"{self.name}: injection failed: {e.msg}") from e

            logger.debug("%s: %.4fs", self.name, elapsed)
            observations.append(elapsed)
        return observations
