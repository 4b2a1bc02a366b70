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
Helpers for E2E tests that wait for a Kubernetes cluster to converge.
"""

from .endpoints import wait_for_http_success
from .framework import Framework
from .predicates import (
    PodStatusError,
    count_running_and_ready,
    count_running_image,
    deployment_ready,
    pod_running_and_ready,
    pod_runs_image,
    pods_ready,
    pods_run_image,
)
from .wait import (
    WaitCancelledError,
    WaitTimeoutError,
    is_not_found,
    poll_until,
    wait_until_gone,
)

__all__ = [
    "Framework",
    "PodStatusError",
    "WaitCancelledError",
    "WaitTimeoutError",
    "count_running_and_ready",
    "count_running_image",
    "deployment_ready",
    "is_not_found",
    "pod_running_and_ready",
    "pod_runs_image",
    "pods_ready",
    "pods_run_image",
    "poll_until",
    "wait_for_http_success",
    "wait_until_gone",
]
