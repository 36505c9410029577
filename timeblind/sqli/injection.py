# browser side of the live sampling: start chrome, load the target and push a
# payload through its form so the submission can be timed

import time
import logging
from selenium import webdriver
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys
from selenium.common.exceptions import (
    NoSuchElementException,
    ElementClickInterceptedException,
    WebDriverException,
)

logger = logging.getLogger("TimeBlind")

SKIPPED_INPUT_TYPES = ("hidden", "submit", "button", "reset", "checkbox", "radio", "file")


def launch_new_browser(headless=True):
    # starts a new Chrome browser instance
    options = webdriver.ChromeOptions()
    options.add_argument("--disable-gpu")
    options.add_argument("--no-sandbox")
    options.add_argument("--window-size=1200,800")
    if headless:
        options.add_argument("--headless")  # run without showing the browser
    return webdriver.Chrome(options=options)


def safe_get(driver, url, max_retries=3, retry_delay=2):
    # tries to load a page up to max_retries times; returns False if it never loads
    for attempt in range(max_retries):
        try:
            driver.get(url)
            return True
        except WebDriverException as e:
            logger.warning("[Attempt %d] Failed to load page: %s", attempt + 1, e.msg)
            time.sleep(retry_delay)
    logger.error("Failed to access %s after %d attempts.", url, max_retries)
    return False


def fillable_inputs(driver):
    # visible inputs a user could type into
    inputs = driver.find_elements(By.TAG_NAME, "input")
    return [
        inp for inp in inputs
        if (inp.get_attribute("type") or "").lower() not in SKIPPED_INPUT_TYPES and inp.is_displayed()
    ]


def find_submit(driver):
    # any submit-type button, <button> first
    for xpath in ('//button[@type="submit"]', '//input[@type="submit"]'):
        try:
            return driver.find_element(By.XPATH, xpath)
        except NoSuchElementException:
            continue
    return None


def fill_payload(driver, payload):
    """
    Types the payload into every fillable input, without submitting.
    Returns the filled inputs.
    """
    inputs = fillable_inputs(driver)
    if not inputs:
        raise NoSuchElementException("no visible input elements to inject into")

    for inp in inputs:
        try:
            inp.clear()
            inp.send_keys(payload)
        except WebDriverException:
            # fallback for inputs that can't be typed into, force-set the value
            driver.execute_script("arguments[0].value = arguments[1];", inp, payload)

    return inputs


def submit_form(driver, inputs):
    # clicks the submit button, or presses RETURN in the first field when there is none
    submit = find_submit(driver)
    if submit is not None:
        try:
            submit.click()
        except ElementClickInterceptedException:
            driver.execute_script("arguments[0].click();", submit)
    else:
        inputs[0].send_keys(Keys.RETURN)
