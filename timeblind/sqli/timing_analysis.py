"""

Helpers to time a single request so the samplers can turn it into an observation.

perf_counter is used instead of time.time() since the wall clock can jump
while we wait on a slow response

"""

import time


def measure_response_time(action_callable, *args, **kwargs):
    """
    Measures the execution time of a given action.
    Returns a tuple (result, elapsed_time) where 'result' is the action's output
    and elapsed_time is in seconds.
    """
    start_time = time.perf_counter()
    result = action_callable(*args, **kwargs)
    end_time = time.perf_counter()
    elapsed = end_time - start_time
    return result, elapsed
