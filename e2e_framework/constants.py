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

# Kubeconfig used when neither an explicit path nor KUBECONFIG is set
DEFAULT_KUBECONFIG_PATH = "bin/KUBECONFIG"

# Seconds between two evaluations of a wait condition
DEFAULT_POLL_INTERVAL = 1.0

# Upper bound for a rollout of a new image across a selection of pods
DEFAULT_IMAGE_ROLLOUT_TIMEOUT = 300

# Upper bound for a Deployment to report its minimum available replicas
DEFAULT_DEPLOYMENT_READY_TIMEOUT = 120

# Per-request timeout for the GETs issued while waiting on an endpoint
DEFAULT_HTTP_REQUEST_TIMEOUT = 5.0

# How much of the last response body goes into a timeout message
RESPONSE_EXCERPT_LENGTH = 200

POD_PHASE_RUNNING = "Running"
POD_PHASE_SUCCEEDED = "Succeeded"
POD_PHASE_FAILED = "Failed"
POD_CONDITION_READY = "Ready"
