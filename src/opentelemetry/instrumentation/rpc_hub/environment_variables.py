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

OTEL_INSTRUMENTATION_RPC_HUB_DEFAULT_LABELS = (
    "OTEL_INSTRUMENTATION_RPC_HUB_DEFAULT_LABELS"
)
"""
.. envvar:: OTEL_INSTRUMENTATION_RPC_HUB_DEFAULT_LABELS

Comma-separated ``key=value`` pairs attached to every recorded metric,
e.g. ``env=prod,region=cn-hangzhou``.
"""

OTEL_INSTRUMENTATION_RPC_HUB_ENABLED = "OTEL_INSTRUMENTATION_RPC_HUB_ENABLED"
"""
.. envvar:: OTEL_INSTRUMENTATION_RPC_HUB_ENABLED

Set to ``false`` to skip creating the metrics logger. Defaults to ``true``.
"""
