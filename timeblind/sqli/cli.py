# cli.py: reads recorded timings from stdin and runs the sequential bootstrap test
# no flags: the TIMEBLIND_* environment variables are the only knobs (see config.py)
#
# exit status: 1 = injection likely, 0 = no evidence, 2 = could not run the test

import sys
import logging

from .config import load_configuration
from .errors import TimeBlindError
from .input_parser import parse_stream
from .random_source import RandomSource
from .reporting import initialize_logger, log_verdict, log_anomaly, verdict_message
from .sequential import SequentialDriver
from .acquisition.sampler import BacklogSampler
from .detection.time_detection import detect_bootstrap_delay

EXIT_NO_EVIDENCE = 0
EXIT_REJECTED = 1
EXIT_ERROR = 2


def run(stream, environ=None):
    """
    Runs one full test on the timings read from 'stream'.
    Returns the process exit status.
    """
    logger = logging.getLogger("TimeBlind")

    try:
        config = load_configuration(environ)
        reference, candidate = parse_stream(stream)

        rng = RandomSource(config["seed"])
        logger.info("Random seed: %s", rng.seed)

        driver = SequentialDriver(
            BacklogSampler(reference, name="reference"),
            BacklogSampler(candidate, name="candidate"),
            rng,
            initial_size=config["sample_budget"]["initial"],
            max_size=config["sample_budget"]["maximum"],
            alpha=config["bootstrap"]["alpha"],
            bootstrap_samples=config["bootstrap"]["samples"],
        )
        result = driver.run()
    except TimeBlindError as e:
        logger.error("[!] Test aborted: %s", e)
        return EXIT_ERROR

    log_verdict(logger, result)
    # the verdict always reaches stderr, whatever the log level
    print(verdict_message(result), file=sys.stderr)
    report = detect_bootstrap_delay(result)
    if report:
        log_anomaly(logger, report)
        return EXIT_REJECTED
    return EXIT_NO_EVIDENCE


def main():
    try:
        config = load_configuration()
    except TimeBlindError as e:
        # logger isn't set up yet, the level itself may be what's broken
        print(f"[!] {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    initialize_logger(log_file=config["log_file"], level=config["log_level"], console=True)
    sys.exit(run(sys.stdin))


if __name__ == "__main__":
    main()
