# Copyright 2026 The Kubernetes Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Fixed-interval polling used by every wait in the framework.
"""

import threading
import time
from typing import Any, Callable, Optional

from kubernetes.client.rest import ApiException

from .constants import DEFAULT_POLL_INTERVAL


class WaitTimeoutError(TimeoutError):
    """The condition did not become true before the timeout elapsed."""


class WaitCancelledError(Exception):
    """The wait was cancelled through its stop event."""


def is_not_found(err: BaseException) -> bool:
    """Returns True if err is a Kubernetes API 'not found' error."""
    return isinstance(err, ApiException) and err.status == 404


def poll_until(
    condition: Callable[[], bool],
    timeout: float,
    interval: float = DEFAULT_POLL_INTERVAL,
    stop_event: Optional[threading.Event] = None,
) -> bool:
    """
    Evaluates condition right away and then every interval seconds until it
    returns True.

    Any exception raised by condition aborts the wait and propagates as is.
    If the timeout elapses first, WaitTimeoutError is raised. The deadline is
    only checked between evaluations, so a condition that succeeds on the
    last evaluation wins over the timeout. Setting stop_event raises
    WaitCancelledError at the next evaluation or during the current sleep.
    """
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")
    if timeout < 0:
        raise ValueError(f"timeout must not be negative, got {timeout}")

    deadline = time.monotonic() + timeout
    while True:
        if stop_event is not None and stop_event.is_set():
            raise WaitCancelledError("wait cancelled")

        if condition():
            return True

        if time.monotonic() >= deadline:
            raise WaitTimeoutError(
                f"condition not met within {timeout} seconds")

        if stop_event is None:
            time.sleep(interval)
        elif stop_event.wait(interval):
            raise WaitCancelledError("wait cancelled")


def wait_until_gone(
    read_func: Callable[[], Any],
    timeout: float,
    interval: float = DEFAULT_POLL_INTERVAL,
    stop_event: Optional[threading.Event] = None,
) -> bool:
    """
    Waits until read_func fails with a 'not found' error.

    Only a 404 counts as gone; any other error from read_func is fatal.
    """
    def gone() -> bool:
        try:
            read_func()
        except ApiException as e:
            if is_not_found(e):
                return True
            raise
        return False

    return poll_until(gone, timeout, interval=interval, stop_event=stop_event)
