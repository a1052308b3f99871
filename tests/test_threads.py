import os
from unittest import mock

import pytest

from barustenberg.threads import compute_num_threads


def test_single_thread_without_multithreading():
    assert compute_num_threads(False) == 1


def test_result_is_power_of_two_not_above_cpu_count():
    n = compute_num_threads(True)
    assert n & (n - 1) == 0
    assert 1 <= n <= os.cpu_count()


@mock.patch("os.cpu_count", return_value=6)
def test_rounds_down_to_power_of_two(_cpu_count):
    assert compute_num_threads(True) == 4


@mock.patch("os.cpu_count", return_value=8)
def test_power_of_two_kept(_cpu_count):
    assert compute_num_threads(True) == 8


@mock.patch("os.cpu_count", return_value=1)
def test_one_cpu(_cpu_count):
    assert compute_num_threads(True) == 1


@mock.patch("os.cpu_count", return_value=None)
def test_unknown_parallelism_raises(_cpu_count):
    with pytest.raises(RuntimeError):
        compute_num_threads(True)