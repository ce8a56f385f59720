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
Decorators that report plain handler callables to a metrics logger.

Usage:
    metrics_logger = RpcHubMetricsLogger(meter_provider)

    @unary_handler(metrics_logger, "/IGreeterService/SayHello")
    def say_hello(request):
        ...

    @hub_method_handler(metrics_logger, "IChatHub/SendMessage")
    def send_message(message):
        ...
"""

import logging
import time
from typing import Any

import wrapt

from .collector import RpcHubMetricsLogger, response_size
from .types import MethodType, ServiceContext, StreamingHubContext


_logger = logging.getLogger(__name__)


def _as_payload(result: Any) -> Any:
    """Serialized bytes for protobuf messages, the result itself otherwise."""
    try:
        serialize = getattr(result, "SerializeToString", None)
        if callable(serialize):
            return serialize()
    except Exception:
        _logger.exception("Error serializing response to measure its size")
        return None
    return result


def _payload_size(result: Any) -> int:
    return response_size(_as_payload(result))


def unary_handler(metrics_logger: RpcHubMetricsLogger, method: str):
    """Report each call of the wrapped function as a unary call to ``method``."""
    context = ServiceContext(method=method, method_type=MethodType.UNARY)

    @wrapt.decorator
    def wrapper(wrapped, instance, args, kwargs):
        metrics_logger.begin_invoke_method(context)
        start_time = time.perf_counter()
        result = None
        failed = False
        try:
            result = wrapped(*args, **kwargs)
            return result
        except Exception:
            failed = True
            raise
        finally:
            metrics_logger.end_invoke_method(
                context,
                _as_payload(result),
                type(result) if result is not None else None,
                (time.perf_counter() - start_time) * 1000.0,
                failed,
            )

    return wrapper


def hub_method_handler(metrics_logger: RpcHubMetricsLogger, path: str):
    """Report each call of the wrapped function as a hub method ``path``."""
    context = StreamingHubContext(path=path)

    @wrapt.decorator
    def wrapper(wrapped, instance, args, kwargs):
        metrics_logger.begin_invoke_hub_method(context)
        start_time = time.perf_counter()
        result = None
        failed = False
        try:
            result = wrapped(*args, **kwargs)
            return result
        except Exception:
            failed = True
            raise
        finally:
            metrics_logger.end_invoke_hub_method(
                context,
                _payload_size(result),
                type(result) if result is not None else None,
                (time.perf_counter() - start_time) * 1000.0,
                failed,
            )

    return wrapper
