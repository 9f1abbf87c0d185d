import time

from contextlib import contextmanager


@contextmanager
def timed(string, log_func):
    """Time the enclosed block and report it with `log_func`, which is
    called as `log_func(string, seconds)`.
    """
    tick = time.perf_counter()
    yield
    tock = time.perf_counter()
    log_func(string, (tock-tick))
