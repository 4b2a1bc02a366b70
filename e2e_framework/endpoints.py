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

import logging
import threading
from typing import Optional

import requests

from .constants import (
    DEFAULT_HTTP_REQUEST_TIMEOUT,
    DEFAULT_POLL_INTERVAL,
    RESPONSE_EXCERPT_LENGTH,
)
from .wait import WaitTimeoutError, poll_until


def _describe_response(response: Optional[requests.Response],
                       error: Optional[Exception]) -> str:
    if response is not None:
        body = (response.text or "")[:RESPONSE_EXCERPT_LENGTH]
        return f"status {response.status_code}, body {body!r}"
    if error is not None:
        return f"no response, last error: {error}"
    return "no response"


def wait_for_http_success(
    url: str,
    timeout: float,
    interval: float = DEFAULT_POLL_INTERVAL,
    request_timeout: float = DEFAULT_HTTP_REQUEST_TIMEOUT,
    stop_event: Optional[threading.Event] = None,
) -> bool:
    """
    Waits for a GET on url to return status 200.

    Connection errors are expected while a service starts up and only mean
    "not yet". On timeout the error names the most recent response, or the
    most recent request error when the last GET failed.
    """
    last_response = None
    last_error = None

    def succeeded() -> bool:
        nonlocal last_response, last_error
        try:
            response = requests.get(url, timeout=request_timeout)
        except requests.exceptions.RequestException as e:
            logging.debug(f"GET {url} failed: {e}")
            last_response = None
            last_error = e
            return False
        last_response = response
        last_error = None
        return response.status_code == 200

    logging.info(f"Waiting for {url} to return a successful status code...")
    try:
        poll_until(succeeded, timeout, interval=interval, stop_event=stop_event)
    except WaitTimeoutError as e:
        raise WaitTimeoutError(
            f"waiting for {url} to return a successful status code timed out. "
            f"Last response from server was: "
            f"{_describe_response(last_response, last_error)}"
        ) from e
    logging.info(f"{url} returned a successful status code.")
    return True
