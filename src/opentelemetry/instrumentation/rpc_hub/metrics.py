# Copyright The OpenTelemetry Authors
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

from opentelemetry.instrumentation.rpc_hub.semconv import (
    RpcHubMetricsAttributes,
)
from opentelemetry.metrics import Meter


class Instruments:
    def __init__(self, meter: Meter):
        self.build_service_definition = meter.create_histogram(
            name=RpcHubMetricsAttributes.BUILD_SERVICE_DEFINITION_METRIC,
            description="Time spent building the set of exposed RPC handlers.",
            unit="ms",
        )

        self.unary_request_count = meter.create_counter(
            name=RpcHubMetricsAttributes.UNARY_REQUEST_METRIC,
            description="The number of unary requests received",
            unit="{request}",
        )
        self.unary_response_size = meter.create_histogram(
            name=RpcHubMetricsAttributes.UNARY_RESPONSE_SIZE_METRIC,
            description="Size of unary response payloads",
            unit="By",
        )
        self.unary_error_count = meter.create_counter(
            name=RpcHubMetricsAttributes.UNARY_ERROR_METRIC,
            description="The number of unary calls that failed or were interrupted",
            unit="{error}",
        )
        self.unary_elapsed = meter.create_histogram(
            name=RpcHubMetricsAttributes.UNARY_ELAPSED_METRIC,
            description="Elapsed time of unary calls",
            unit="ms",
        )

        self.streaming_hub_error_count = meter.create_counter(
            name=RpcHubMetricsAttributes.STREAMING_HUB_ERROR_METRIC,
            description="The number of hub method calls that failed or were interrupted",
            unit="{error}",
        )
        self.streaming_hub_elapsed = meter.create_histogram(
            name=RpcHubMetricsAttributes.STREAMING_HUB_ELAPSED_METRIC,
            description="Elapsed time of hub method calls",
            unit="ms",
        )
        self.streaming_hub_request_count = meter.create_counter(
            name=RpcHubMetricsAttributes.STREAMING_HUB_REQUEST_METRIC,
            description="The number of hub method requests received",
            unit="{request}",
        )
        self.streaming_hub_response_size = meter.create_histogram(
            name=RpcHubMetricsAttributes.STREAMING_HUB_RESPONSE_SIZE_METRIC,
            description="Size of hub method response payloads",
            unit="By",
        )

        # connect - disconnect = currently open sessions (clean disconnects only)
        self.streaming_hub_connect_count = meter.create_counter(
            name=RpcHubMetricsAttributes.STREAMING_HUB_CONNECT_METRIC,
            description="The number of streaming hub sessions opened",
            unit="{connection}",
        )
        self.streaming_hub_disconnect_count = meter.create_counter(
            name=RpcHubMetricsAttributes.STREAMING_HUB_DISCONNECT_METRIC,
            description="The number of streaming hub sessions closed",
            unit="{connection}",
        )
