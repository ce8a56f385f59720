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
Call context types handed to the metrics logger by the RPC dispatch layer.

Dispatch layers may pass their own objects instead, as long as they expose
the same attributes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class MethodType(Enum):
    UNARY = "unary"
    CLIENT_STREAMING = "client_streaming"
    SERVER_STREAMING = "server_streaming"
    DUPLEX_STREAMING = "duplex_streaming"


@dataclass(frozen=True)
class ServiceContext:
    """A service call: unary, or the duplex stream carrying a hub session."""

    # Fully-qualified method, e.g. "/IGreeterService/SayHello"
    method: str
    method_type: Union[MethodType, str] = MethodType.UNARY


@dataclass(frozen=True)
class StreamingHubContext:
    """A method invoked inside an established streaming hub session."""

    # "{HubInterface}/{Method}", without a leading slash
    path: str
