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
import os
import threading
import uuid
from typing import List, Optional

import kubernetes

from .constants import (
    DEFAULT_DEPLOYMENT_READY_TIMEOUT,
    DEFAULT_IMAGE_ROLLOUT_TIMEOUT,
    DEFAULT_KUBECONFIG_PATH,
    DEFAULT_POLL_INTERVAL,
)
from .predicates import (
    deployment_ready,
    pods_ready,
    pods_run_image,
)
from .wait import WaitTimeoutError, poll_until, wait_until_gone


class Framework:
    """Kubernetes access and convergence waits for E2E tests"""

    def __init__(
        self,
        kubeconfig_path: Optional[str] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        image_rollout_timeout: float = DEFAULT_IMAGE_ROLLOUT_TIMEOUT,
    ):
        self.kubeconfig_path = kubeconfig_path or os.environ.get(
            "KUBECONFIG", DEFAULT_KUBECONFIG_PATH
        )
        self.poll_interval = poll_interval
        self.image_rollout_timeout = image_rollout_timeout
        self._api_client = None
        self.namespace = None

    def get_api_client(self):
        """Returns a Kubernetes API client"""
        if not self._api_client:
            self._api_client = kubernetes.config.new_client_from_config(
                self.kubeconfig_path
            )
        return self._api_client

    def get_core_v1_api(self):
        """Returns the CoreV1Api client"""
        return kubernetes.client.CoreV1Api(self.get_api_client())

    def get_apps_v1_api(self):
        """Returns the AppsV1Api client"""
        return kubernetes.client.AppsV1Api(self.get_api_client())

    def _resolve_namespace(self, namespace: Optional[str]) -> str:
        if namespace is None:
            namespace = self.namespace
        if not namespace:
            raise ValueError("Namespace must be provided.")
        return namespace

    def create_temp_namespace(self, prefix="test-"):
        """Creates a temporary namespace for testing"""
        core_v1 = self.get_core_v1_api()
        namespace_name = f"{prefix}{uuid.uuid4().hex[:8]}"
        namespace_manifest = {
            "apiVersion": "v1",
            "kind": "Namespace",
            "metadata": {"name": namespace_name},
        }
        core_v1.create_namespace(body=namespace_manifest)
        self.namespace = namespace_name
        logging.info(f"Created namespace: {self.namespace}")
        return self.namespace

    def delete_namespace(self, namespace: Optional[str] = None):
        """Deletes the specified namespace"""
        if namespace is None:
            namespace = self.namespace
        if not namespace:
            return
        core_v1 = self.get_core_v1_api()
        try:
            core_v1.delete_namespace(name=namespace)
            logging.info(f"Deleted namespace: {namespace}")
        except kubernetes.client.rest.ApiException as e:
            if e.status != 404:
                raise
            logging.info(f"Namespace {namespace} not found, skipping deletion.")
        if self.namespace == namespace:
            self.namespace = None

    def list_pods(
        self, namespace: Optional[str] = None, label_selector: str = ""
    ) -> List[kubernetes.client.V1Pod]:
        """Returns the pods in namespace matching label_selector"""
        namespace = self._resolve_namespace(namespace)
        pod_list = self.get_core_v1_api().list_namespaced_pod(
            namespace=namespace, label_selector=label_selector
        )
        return list(pod_list.items or [])

    def get_deployment(
        self, name: str, namespace: Optional[str] = None
    ) -> kubernetes.client.V1Deployment:
        namespace = self._resolve_namespace(namespace)
        return self.get_apps_v1_api().read_namespaced_deployment(
            name=name, namespace=namespace
        )

    def get_logs(
        self, pod_name: str, container_name: str, namespace: Optional[str] = None
    ) -> str:
        """Returns the logs of one container of a pod"""
        namespace = self._resolve_namespace(namespace)
        return self.get_core_v1_api().read_namespaced_pod_log(
            name=pod_name, namespace=namespace, container=container_name
        )

    def wait_for_pods_ready(
        self,
        label_selector: str,
        expected_replicas: int,
        timeout: float,
        namespace: Optional[str] = None,
        stop_event: Optional[threading.Event] = None,
    ):
        """
        Waits for exactly expected_replicas pods matching label_selector to be
        running with every container passing its readiness check.

        Listing errors and pods in an unclassifiable state abort the wait.
        """
        namespace = self._resolve_namespace(namespace)
        is_ready = pods_ready(expected_replicas)

        def ready() -> bool:
            pods = self.list_pods(namespace, label_selector)
            logging.debug(
                f"Pods '{label_selector}' in '{namespace}': listed {len(pods)}."
            )
            return is_ready(pods)

        logging.info(
            f"Waiting for {expected_replicas} pods '{label_selector}' "
            f"in namespace '{namespace}' to be ready..."
        )
        try:
            poll_until(ready, timeout, interval=self.poll_interval,
                       stop_event=stop_event)
        except WaitTimeoutError as e:
            raise WaitTimeoutError(
                f"{expected_replicas} pods '{label_selector}' in namespace "
                f"'{namespace}' did not become ready within {timeout} seconds."
            ) from e
        logging.info(f"Pods '{label_selector}' are ready.")
        return True

    def wait_for_pods_run_image(
        self,
        label_selector: str,
        expected_replicas: int,
        image: str,
        timeout: Optional[float] = None,
        namespace: Optional[str] = None,
        stop_event: Optional[threading.Event] = None,
    ):
        """
        Waits for exactly expected_replicas pods matching label_selector to
        declare a container with image. The timeout defaults to
        image_rollout_timeout.
        """
        namespace = self._resolve_namespace(namespace)
        if timeout is None:
            timeout = self.image_rollout_timeout

        runs_image = pods_run_image(expected_replicas, image)

        def rolled_out() -> bool:
            return runs_image(self.list_pods(namespace, label_selector))

        logging.info(
            f"Waiting for {expected_replicas} pods '{label_selector}' "
            f"in namespace '{namespace}' to run image '{image}'..."
        )
        try:
            poll_until(rolled_out, timeout, interval=self.poll_interval,
                       stop_event=stop_event)
        except WaitTimeoutError as e:
            raise WaitTimeoutError(
                f"{expected_replicas} pods '{label_selector}' in namespace "
                f"'{namespace}' did not run image '{image}' within "
                f"{timeout} seconds."
            ) from e
        logging.info(f"Pods '{label_selector}' run image '{image}'.")
        return True

    def wait_for_deployment_ready(
        self,
        name: str,
        namespace: Optional[str] = None,
        min_ready: int = 1,
        timeout: Optional[float] = None,
        stop_event: Optional[threading.Event] = None,
    ):
        """
        Waits for a Deployment to have at least min_ready available replicas.
        The timeout defaults to DEFAULT_DEPLOYMENT_READY_TIMEOUT.
        """
        namespace = self._resolve_namespace(namespace)
        if timeout is None:
            timeout = DEFAULT_DEPLOYMENT_READY_TIMEOUT
        is_ready = deployment_ready(min_ready)

        logging.info(
            f"Waiting for Deployment {name} in namespace '{namespace}' "
            f"to have {min_ready} available replicas..."
        )

        try:
            poll_until(
                lambda: is_ready(self.get_deployment(name, namespace)),
                timeout,
                interval=self.poll_interval,
                stop_event=stop_event,
            )
        except WaitTimeoutError as e:
            raise WaitTimeoutError(
                f"Deployment {name} did not become ready within {timeout} seconds."
            ) from e
        logging.info(f"Deployment {name} has {min_ready} available replicas.")
        return True

    def wait_until_deployment_gone(
        self,
        name: str,
        timeout: float,
        namespace: Optional[str] = None,
        stop_event: Optional[threading.Event] = None,
    ):
        """Waits until reading the Deployment fails with 'not found'"""
        namespace = self._resolve_namespace(namespace)
        logging.info(f"Waiting for Deployment {name} to be gone...")
        try:
            wait_until_gone(
                lambda: self.get_deployment(name, namespace),
                timeout,
                interval=self.poll_interval,
                stop_event=stop_event,
            )
        except WaitTimeoutError as e:
            raise WaitTimeoutError(
                f"Deployment {name} still exists after {timeout} seconds."
            ) from e
        logging.info(f"Deployment {name} is gone.")
        return True
