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
Metrics logger for RPC lifecycle callbacks.

The RPC dispatch layer calls one method per lifecycle event, on whichever
thread serves the call. Each method maps the event onto a fixed set of
instrument updates. Recording is fire-and-forget: failures are logged and
never reach the RPC being measured.
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from opentelemetry.context import Context
from opentelemetry.metrics import MeterProvider

from ._dispatch import (
    CallKind,
    classify_hub_call,
    classify_service_call,
    hub_call_identifier,
    service_call_identifier,
)
from ._labels import (
    BUILD_SERVICE_DEFINITION_IDENTIFIER,
    DefaultLabels,
    LabelResolver,
)
from .metrics import Instruments
from .version import __version__

_logger = logging.getLogger(__name__)

_METER_NAME = "opentelemetry.instrumentation.rpc_hub"


def response_size(payload: Any) -> int:
    """Length of a response payload; 0 when absent or unsized."""
    if payload is None:
        return 0
    try:
        return len(payload)
    except TypeError:
        _logger.debug(
            "Cannot measure response of type %s, recording size 0",
            type(payload).__name__,
        )
    except Exception:
        _logger.exception("Error measuring response size, recording size 0")
    return 0


class RpcHubMetricsLogger:
    """
    Records unary and streaming hub lifecycle events as OpenTelemetry metrics.

    Args:
        meter_provider: Provider the instruments are created from. Required.
        version: Version reported on the meter, defaults to this package's.
        default_labels: Labels attached to every recording.
        label_resolver: Pre-built resolver; overrides ``default_labels``.
    """

    def __init__(
        self,
        meter_provider: MeterProvider,
        version: Optional[str] = None,
        default_labels: Optional[DefaultLabels] = None,
        label_resolver: Optional[LabelResolver] = None,
    ) -> None:
        if meter_provider is None:
            raise ValueError("meter_provider is required")

        if label_resolver is None:
            label_resolver = LabelResolver(default_labels)
        self._labels = label_resolver
        meter = meter_provider.get_meter(_METER_NAME, version or __version__)
        self._instruments = Instruments(meter)
        _logger.debug(
            "RpcHubMetricsLogger initialized with default labels %s",
            self._labels.default_labels,
        )

    @property
    def label_resolver(self) -> LabelResolver:
        return self._labels

    def begin_build_service_definition(self) -> None:
        pass

    def end_build_service_definition(
        self, elapsed: float, *, trace_context: Optional[Context] = None
    ) -> None:
        try:
            self._instruments.build_service_definition.record(
                elapsed,
                attributes=self._labels.resolve(
                    BUILD_SERVICE_DEFINITION_IDENTIFIER
                ),
                context=trace_context,
            )
        except Exception:
            _logger.exception("Error recording service definition build time")

    @contextmanager
    def time_build_service_definition(self) -> Iterator[None]:
        """Time the enclosed block as a service definition build, in ms."""
        self.begin_build_service_definition()
        start = time.perf_counter()
        try:
            yield
        finally:
            self.end_build_service_definition(
                (time.perf_counter() - start) * 1000.0
            )

    def begin_invoke_method(
        self,
        context: Any,
        request: Optional[bytes] = None,
        request_type: Optional[type] = None,
        *,
        trace_context: Optional[Context] = None,
    ) -> None:
        try:
            kind = classify_service_call(context)
            if kind is CallKind.HUB_CONNECT:
                self._instruments.streaming_hub_connect_count.add(
                    1,
                    attributes=self._labels.resolve(
                        service_call_identifier(context)
                    ),
                    context=trace_context,
                )
            elif kind is CallKind.UNARY:
                self._instruments.unary_request_count.add(
                    1,
                    attributes=self._labels.resolve(
                        service_call_identifier(context)
                    ),
                    context=trace_context,
                )
        except Exception:
            _logger.exception("Error recording method begin metrics")

    def end_invoke_method(
        self,
        context: Any,
        response: Optional[bytes],
        response_type: Optional[type],
        elapsed: float,
        is_error_or_interrupted: bool,
        *,
        trace_context: Optional[Context] = None,
    ) -> None:
        try:
            kind = classify_service_call(context)
            if kind is CallKind.HUB_CONNECT:
                self._instruments.streaming_hub_disconnect_count.add(
                    1,
                    attributes=self._labels.resolve(
                        service_call_identifier(context)
                    ),
                    context=trace_context,
                )
            elif kind is CallKind.UNARY:
                labels = self._labels.resolve(service_call_identifier(context))
                if response is None:
                    _logger.debug(
                        "No response payload for %s, recording size 0",
                        context.method,
                    )
                size = response_size(response)

                self._instruments.unary_elapsed.record(
                    elapsed, attributes=labels, context=trace_context
                )
                self._instruments.unary_response_size.record(
                    size, attributes=labels, context=trace_context
                )
                if is_error_or_interrupted:
                    self._instruments.unary_error_count.add(
                        1, attributes=labels, context=trace_context
                    )
        except Exception:
            _logger.exception("Error recording method end metrics")

    def begin_invoke_hub_method(
        self,
        context: Any,
        request: Optional[bytes] = None,
        request_type: Optional[type] = None,
        *,
        trace_context: Optional[Context] = None,
    ) -> None:
        try:
            if classify_hub_call(context) is not CallKind.HUB_METHOD:
                _logger.debug("Ignoring hub method begin without a hub path")
                return
            self._instruments.streaming_hub_request_count.add(
                1,
                attributes=self._labels.resolve(hub_call_identifier(context)),
                context=trace_context,
            )
        except Exception:
            _logger.exception("Error recording hub method begin metrics")

    def end_invoke_hub_method(
        self,
        context: Any,
        response_size: int,
        response_type: Optional[type],
        elapsed: float,
        is_error_or_interrupted: bool,
        *,
        trace_context: Optional[Context] = None,
    ) -> None:
        try:
            if classify_hub_call(context) is not CallKind.HUB_METHOD:
                _logger.debug("Ignoring hub method end without a hub path")
                return
            labels = self._labels.resolve(hub_call_identifier(context))
            self._instruments.streaming_hub_elapsed.record(
                elapsed, attributes=labels, context=trace_context
            )
            # The response size is added to the request counter, not to
            # streaming_hub_response_size. Dashboards depend on this.
            if isinstance(response_size, bool) or not isinstance(
                response_size, int
            ):
                _logger.warning(
                    "Invalid response size %r for %s, not recorded",
                    response_size,
                    hub_call_identifier(context),
                )
            elif response_size < 0:
                _logger.warning(
                    "Negative response size %s for %s, not recorded",
                    response_size,
                    hub_call_identifier(context),
                )
            else:
                self._instruments.streaming_hub_request_count.add(
                    response_size, attributes=labels, context=trace_context
                )
            if is_error_or_interrupted:
                self._instruments.streaming_hub_error_count.add(
                    1, attributes=labels, context=trace_context
                )
        except Exception:
            _logger.exception("Error recording hub method end metrics")

    def invoke_hub_broadcast(
        self, group_name: str, response_size: int, broadcast_group_count: int
    ) -> None:
        # TODO: record broadcast metrics once the broadcast method name is
        # available here; group name alone is too coarse to label by.
        pass

    def read_from_stream(
        self,
        context: Any,
        read_data: Optional[bytes],
        data_type: Optional[type],
        complete: bool,
    ) -> None:
        pass

    def write_to_stream(
        self,
        context: Any,
        write_data: Optional[bytes],
        data_type: Optional[type],
    ) -> None:
        pass
