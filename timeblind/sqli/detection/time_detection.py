"""
Module: time_detection.py
-------------------------
Turns the outcome of the sequential bootstrap test into an anomaly report
(label, matched text, context) for log_anomaly.
"""

import logging

logger = logging.getLogger("TimeBlind")


def detect_bootstrap_delay(result):
    # None unless the test rejected, otherwise a report describing the interval
    if not result.rejected:
        return None

    test = result.last_test
    lower, upper = test.interval
    # the sign only tells which group was slower
    slower = "candidate" if upper < 0 else "reference"
    delay = min(abs(lower), abs(upper))

    report = {
        "label": "Time:Bootstrap",
        "matched_text": f"{slower} group slower by at least {delay:.4f}s",
        "context": (
            f"Interval: [{lower:.4f}, {upper:.4f}], "
            f"{result.size} observations per group after {result.rounds} round(s)"
        ),
    }
    logger.debug("Time anomaly detected: %s", report)
    return report
