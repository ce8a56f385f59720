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
Label resolution for RPC metrics.

Every recording carries the process-wide default labels plus one method
label. Label sets are built once per call identifier and shared afterwards.
"""

import logging
import threading
from types import MappingProxyType
from typing import Iterable, Mapping, MutableMapping, Optional, Tuple, Union

_logger = logging.getLogger(__name__)

METHOD_KEY = "rpc.method"

# Synthetic call identifier used for service-definition build timings
BUILD_SERVICE_DEFINITION_IDENTIFIER = "EndBuildServiceDefinition"

Labels = Mapping[str, str]
DefaultLabels = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class LabelResolver:
    """
    Resolves a call identifier into an immutable label set.

    Args:
        default_labels: Labels attached to every recording. Either a mapping
                        or an iterable of ``(key, value)`` pairs. ``None`` is
                        treated as empty.
        cache: Storage for resolved label sets, keyed by call identifier.
               A fresh dict owned by the resolver is used when omitted.
    """

    def __init__(
        self,
        default_labels: Optional[DefaultLabels] = None,
        cache: Optional[MutableMapping[str, Labels]] = None,
    ) -> None:
        self._default_labels = dict(default_labels or ())
        self._cache = cache if cache is not None else {}
        self._lock = threading.Lock()

    @property
    def default_labels(self) -> Labels:
        return MappingProxyType(self._default_labels)

    def resolve(self, call_identifier: str) -> Labels:
        labels = self._cache.get(call_identifier)
        if labels is not None:
            return labels

        with self._lock:
            labels = self._cache.get(call_identifier)
            if labels is None:
                labels = self._build(call_identifier)
                self._cache[call_identifier] = labels
                _logger.debug("Cached labels for %s", call_identifier)
        return labels

    def _build(self, call_identifier: str) -> Labels:
        labels = dict(self._default_labels)
        labels[METHOD_KEY] = call_identifier
        return MappingProxyType(labels)

    def __len__(self) -> int:
        return len(self._cache)
