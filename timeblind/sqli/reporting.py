# reporting.py
# handles logging to file and console for the timing test
# also formats the per-round interval lines and the final verdict

import logging

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

REJECTED_MESSAGE = "Null hypothesis rejected: blind sql injection highly likely"
EXHAUSTED_MESSAGE = "Null hypothesis not rejected: no evidence of a timing difference"


def initialize_logger(log_file=None, level=logging.INFO, console=False):
    """
    Sets up the main logger for the timing test.

    Params:
      log_file: where to write logs on disk, None for no file
      level: minimum logging level (INFO, DEBUG, etc.)
      console: if True, also logs to the terminal (stderr)

    Returns:
      logger instance
    """
    logger = logging.getLogger("TimeBlind")

    # prevent duplicate handlers if this was called before
    if not logger.hasHandlers():
        logger.setLevel(level)

        # standard format for all handlers
        formatter = logging.Formatter(LOG_FORMAT)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        if console:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

    # separate logger for the per-round interval lines, very chatty
    rounds_logger = logging.getLogger("TimeBlind.rounds")
    rounds_logger.setLevel(logging.DEBUG)

    return logger


def log_round(round_number, test):
    """
    Logs one round's interval, goes to the rounds sub-logger (DEBUG level).

    Params:
      round_number: 1 for the first test
      test: the HypothesisTest of that round
    """
    rounds_logger = logging.getLogger("TimeBlind.rounds")
    rounds_logger.debug(
        "Round %d (n=%d): interval [%.6f, %.6f]%s",
        round_number, test.size, test.lower, test.upper,
        " -> rejected" if test.rejected else "",
    )


def verdict_message(result):
    message = REJECTED_MESSAGE if result.rejected else EXHAUSTED_MESSAGE
    return f"{message} (after {result.rounds} round(s), {result.size} observations per group)"


def log_verdict(logger, result):
    # final line of a run, same level for both outcomes
    logger.warning(verdict_message(result))


def log_anomaly(logger, anomaly_details):
    """
    Logs a quick summary of a detected timing anomaly.

    Params:
      anomaly_details: a dict from the time detection module
    """
    label = anomaly_details.get("label", "N/A")
    matched = anomaly_details.get("matched_text", "")
    context = anomaly_details.get("context", "")
    logger.warning("Anomaly detected: %s | %s | %s", label, matched, context)
