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

"""
OpenTelemetry RPC Hub Metrics Instrumentation
=============================================

Records metrics for unary RPC calls and streaming hub sessions from the
lifecycle callbacks of an RPC dispatch layer.

Configuration
-------------

* ``OTEL_INSTRUMENTATION_RPC_HUB_DEFAULT_LABELS``: Comma-separated
  ``key=value`` labels added to every metric
* ``OTEL_INSTRUMENTATION_RPC_HUB_ENABLED``: Enable/disable (default: true)

Usage
-----

.. code:: python

    from opentelemetry.instrumentation.rpc_hub import RpcHubInstrumentor

    RpcHubInstrumentor().instrument(default_labels={"env": "prod"})
    metrics_logger = RpcHubInstrumentor().metrics_logger

    # From the dispatch layer
    metrics_logger.begin_invoke_method(context)
    metrics_logger.end_invoke_method(context, response, None, elapsed_ms, False)

API
---
"""

import logging
from typing import Any, Collection, Optional

from opentelemetry import metrics as otel_metrics
from opentelemetry.instrumentation.instrumentor import BaseInstrumentor

from ._labels import METHOD_KEY, LabelResolver
from .collector import RpcHubMetricsLogger
from .env_utils import get_default_labels, is_instrumentation_enabled
from .package import _instruments
from .types import MethodType, ServiceContext, StreamingHubContext
from .version import __version__

_logger = logging.getLogger(__name__)

__all__ = [
    "METHOD_KEY",
    "LabelResolver",
    "MethodType",
    "RpcHubInstrumentor",
    "RpcHubMetricsLogger",
    "ServiceContext",
    "StreamingHubContext",
    "get_metrics_logger",
]

# Process-wide logger handed to the dispatch layer
_global_metrics_logger: Optional[RpcHubMetricsLogger] = None


def get_metrics_logger() -> Optional[RpcHubMetricsLogger]:
    """Return the logger installed by ``RpcHubInstrumentor``, if any."""
    return _global_metrics_logger


class RpcHubInstrumentor(BaseInstrumentor):
    """
    An instrumentor that installs a process-wide ``RpcHubMetricsLogger``.

    Accepted ``instrument()`` arguments:
    - meter_provider: defaults to the global meter provider
    - default_labels: defaults to OTEL_INSTRUMENTATION_RPC_HUB_DEFAULT_LABELS
    - version: version reported on the meter
    """

    def instrumentation_dependencies(self) -> Collection[str]:
        return _instruments

    @property
    def metrics_logger(self) -> Optional[RpcHubMetricsLogger]:
        return _global_metrics_logger

    def _instrument(self, **kwargs: Any):
        global _global_metrics_logger

        if not is_instrumentation_enabled():
            _logger.info("RPC hub instrumentation disabled by environment")
            return

        meter_provider = (
            kwargs.get("meter_provider") or otel_metrics.get_meter_provider()
        )
        default_labels = kwargs.get("default_labels")
        if default_labels is None:
            default_labels = get_default_labels()

        _global_metrics_logger = RpcHubMetricsLogger(
            meter_provider,
            version=kwargs.get("version"),
            default_labels=default_labels,
        )
        _logger.debug("Installed RPC hub metrics logger")

    def _uninstrument(self, **kwargs: Any):
        global _global_metrics_logger
        _global_metrics_logger = None
