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

"""Test Configuration"""

import pytest

from opentelemetry.instrumentation.rpc_hub import RpcHubMetricsLogger
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import InMemoryMetricReader


@pytest.fixture(scope="function", name="metric_reader")
def fixture_metric_reader():
    """Create in-memory metric reader"""
    reader = InMemoryMetricReader()
    yield reader


@pytest.fixture(scope="function", name="meter_provider")
def fixture_meter_provider(metric_reader):
    """Create meter provider"""
    meter_provider = MeterProvider(
        metric_readers=[metric_reader],
    )
    yield meter_provider
    meter_provider.shutdown()


@pytest.fixture(scope="function", name="metrics_logger")
def fixture_metrics_logger(meter_provider):
    """Metrics logger without default labels"""
    return RpcHubMetricsLogger(meter_provider)


@pytest.fixture(scope="function", name="labeled_metrics_logger")
def fixture_labeled_metrics_logger(meter_provider):
    """Metrics logger with env=prod as default label"""
    return RpcHubMetricsLogger(meter_provider, default_labels={"env": "prod"})
