"""Choice of the worker thread count."""

import os

from .bitop import get_msb64


def compute_num_threads(multithreading: bool = True) -> int:
    """Number of threads to use: the available parallelism rounded down to a power of two.

    With ``multithreading`` off a single thread is used.
    """
    if multithreading:
        available = os.cpu_count()
        if not available:
            raise RuntimeError("unable to determine the available parallelism")
    else:
        available = 1
    return 1 << get_msb64(available)