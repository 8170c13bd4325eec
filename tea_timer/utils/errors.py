# tea_timer/utils/errors.py
class TimerStoppedError(RuntimeError):
    """
    Raised when a Timer is used after stop().
    A stopped timer never produces a second (stale) reading.
    """


class ConfigError(RuntimeError):
    """
    Raised for a missing, unreadable or malformed config file.
    The CLI renders it as a one-line message without a traceback.
    """
