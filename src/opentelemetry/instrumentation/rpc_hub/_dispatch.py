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

from enum import Enum
from typing import Any, Union

from .types import MethodType

# Duplex method that establishes a streaming hub session
HUB_CONNECT_SUFFIX = "/Connect"


class CallKind(Enum):
    UNARY = "unary"
    HUB_CONNECT = "hub_connect"
    HUB_METHOD = "hub_method"
    OTHER = "other"


def _squash(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


def _normalize_method_type(method_type: Union[MethodType, str, Any]) -> Any:
    if isinstance(method_type, MethodType):
        return method_type
    # Foreign enums match by member name, e.g. DuplexStreaming or DUPLEX_STREAMING
    name = getattr(method_type, "name", method_type)
    if isinstance(name, str):
        normalized = _squash(name)
        for member in MethodType:
            if normalized == _squash(member.name):
                return member
    return None


def classify_service_call(context: Any) -> CallKind:
    """
    Decide once which kind of call a service context describes.

    A duplex stream whose method ends in ``/Connect`` is a hub session;
    everything that is neither that nor unary is ``OTHER``.
    """
    method_type = _normalize_method_type(context.method_type)
    if method_type is MethodType.DUPLEX_STREAMING and context.method.endswith(
        HUB_CONNECT_SUFFIX
    ):
        return CallKind.HUB_CONNECT
    if method_type is MethodType.UNARY:
        return CallKind.UNARY
    return CallKind.OTHER


def classify_hub_call(context: Any) -> CallKind:
    """A hub method call is any context carrying a hub path."""
    if isinstance(getattr(context, "path", None), str):
        return CallKind.HUB_METHOD
    return CallKind.OTHER


def service_call_identifier(context: Any) -> str:
    # Unary methods already start with "/{Service}/{Method}"
    return context.method


def hub_call_identifier(context: Any) -> str:
    return "/" + context.path
