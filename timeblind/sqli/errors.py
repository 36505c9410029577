# errors raised by the timing test
# everything is fatal, nothing is retried, the cli turns these into exit status 2


class TimeBlindError(Exception):
    """Base class for every error the timing test raises on purpose."""


class ConfigurationError(TimeBlindError):
    # bad input stream or bad configuration value
    pass


class InsufficientDataError(TimeBlindError):
    """
    A backlog holds fewer observations than the sample budget needs.
    Raised before any testing begins.
    """

    def __init__(self, group, available, required):
        self.group = group
        self.available = available
        self.required = required
        super().__init__(
            f"{group} group has {available} observations, at least {required} are required"
        )


class AcquisitionError(TimeBlindError):
    # a sampler could not produce an observation (network, browser, ...)
    pass


class AcquisitionUnderflowError(AcquisitionError):
    # backlog ran dry while the driver still wanted observations
    pass


class EmptyGroupError(TimeBlindError):
    # internal invariant violation: an empty group reached the statistics
    pass
