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

from typing import Iterable

import kubernetes

from .constants import (
    POD_CONDITION_READY,
    POD_PHASE_FAILED,
    POD_PHASE_RUNNING,
    POD_PHASE_SUCCEEDED,
)


class PodStatusError(ValueError):
    """A pod's status can not be classified as running and ready or not."""


def _pod_name(pod: kubernetes.client.V1Pod) -> str:
    if pod.metadata and pod.metadata.name:
        return pod.metadata.name
    return "<unnamed>"


def pod_running_and_ready(pod: kubernetes.client.V1Pod) -> bool:
    """
    Returns True if the pod is Running, its Ready condition is True and every
    container reports ready.

    Raises PodStatusError when the pod has no status, has already completed,
    or is Running without a Ready condition.
    """
    status = pod.status
    if not status:
        raise PodStatusError(f"pod {_pod_name(pod)} has no status")

    if status.phase in (POD_PHASE_FAILED, POD_PHASE_SUCCEEDED):
        raise PodStatusError(
            f"pod {_pod_name(pod)} completed with phase {status.phase}")
    if status.phase != POD_PHASE_RUNNING:
        return False

    for condition in status.conditions or []:
        if condition.type != POD_CONDITION_READY:
            continue
        if condition.status != "True":
            return False
        return all(cs.ready for cs in status.container_statuses or [])

    raise PodStatusError(
        f"pod {_pod_name(pod)} is running but has no ready condition")


def pod_runs_image(pod: kubernetes.client.V1Pod, image: str) -> bool:
    """Returns True if any container of the pod is declared with image."""
    if not pod.spec:
        return False
    return any(c.image == image for c in pod.spec.containers or [])


def count_running_and_ready(pods: Iterable[kubernetes.client.V1Pod]) -> int:
    return sum(1 for p in pods if pod_running_and_ready(p))


def count_running_image(
    pods: Iterable[kubernetes.client.V1Pod], image: str
) -> int:
    return sum(1 for p in pods if pod_runs_image(p, image))


def pods_ready(expected_replicas: int):
    """Predicate on a pod list: exactly expected_replicas running and ready."""

    def check(pods) -> bool:
        return count_running_and_ready(pods) == expected_replicas

    return check


def pods_run_image(expected_replicas: int, image: str):
    """Predicate on a pod list: exactly expected_replicas run image."""

    def check(pods) -> bool:
        return count_running_image(pods, image) == expected_replicas

    return check


def deployment_ready(min_ready: int = 1):
    """Predicate to check if a Deployment has at least min_ready available replicas."""

    def check(obj: kubernetes.client.V1Deployment) -> bool:
        if obj.status:
            available_replicas = obj.status.available_replicas or 0
            return available_replicas >= min_ready
        return False

    return check
