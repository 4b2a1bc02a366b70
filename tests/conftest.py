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

import pytest
from kubernetes import client

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)


def _make_pod(
    name: str,
    phase: str = "Running",
    ready: bool = True,
    images=("registry.local/app:v1",),
    with_ready_condition: bool = True,
    containers_ready=None,
    with_status: bool = True,
) -> client.V1Pod:
    containers = [
        client.V1Container(name=f"c{i}", image=image)
        for i, image in enumerate(images)
    ]
    status = None
    if with_status:
        conditions = []
        if with_ready_condition:
            conditions.append(
                client.V1PodCondition(type="Ready", status="True" if ready else "False")
            )
        if containers_ready is None:
            containers_ready = [ready] * len(containers)
        status = client.V1PodStatus(
            phase=phase,
            conditions=conditions,
            container_statuses=[
                client.V1ContainerStatus(
                    name=c.name,
                    image=c.image,
                    image_id="",
                    ready=is_ready,
                    restart_count=0,
                )
                for c, is_ready in zip(containers, containers_ready)
            ],
        )
    return client.V1Pod(
        metadata=client.V1ObjectMeta(name=name),
        spec=client.V1PodSpec(containers=containers),
        status=status,
    )


@pytest.fixture
def make_pod():
    """Builds V1Pod snapshots without a cluster"""
    return _make_pod


def _make_deployment(
    name: str = "operator",
    available_replicas=None,
    with_status: bool = True,
) -> client.V1Deployment:
    status = None
    if with_status:
        status = client.V1DeploymentStatus(available_replicas=available_replicas)
    return client.V1Deployment(
        metadata=client.V1ObjectMeta(name=name),
        spec=client.V1DeploymentSpec(
            selector=client.V1LabelSelector(),
            template=client.V1PodTemplateSpec(),
        ),
        status=status,
    )


@pytest.fixture
def make_deployment():
    """Builds V1Deployment snapshots without a cluster"""
    return _make_deployment
