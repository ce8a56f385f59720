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


class RpcHubMetricsAttributes:
    BUILD_SERVICE_DEFINITION_METRIC = (
        "rpc_hub.service_definition.build.duration"
    )

    UNARY_REQUEST_METRIC = "rpc_hub.unary.request.count"
    UNARY_RESPONSE_SIZE_METRIC = "rpc_hub.unary.response.size"
    UNARY_ERROR_METRIC = "rpc_hub.unary.error.count"
    UNARY_ELAPSED_METRIC = "rpc_hub.unary.duration"

    STREAMING_HUB_ERROR_METRIC = "rpc_hub.streaming_hub.error.count"
    STREAMING_HUB_ELAPSED_METRIC = "rpc_hub.streaming_hub.duration"
    STREAMING_HUB_REQUEST_METRIC = "rpc_hub.streaming_hub.request.count"
    STREAMING_HUB_RESPONSE_SIZE_METRIC = "rpc_hub.streaming_hub.response.size"
    STREAMING_HUB_CONNECT_METRIC = "rpc_hub.streaming_hub.connect.count"
    STREAMING_HUB_DISCONNECT_METRIC = "rpc_hub.streaming_hub.disconnect.count"
