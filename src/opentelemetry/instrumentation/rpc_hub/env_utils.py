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

import logging
from os import environ
from typing import Dict, Optional

from .environment_variables import (
    OTEL_INSTRUMENTATION_RPC_HUB_DEFAULT_LABELS,
    OTEL_INSTRUMENTATION_RPC_HUB_ENABLED,
)

_logger = logging.getLogger(__name__)


def is_true_value(value) -> bool:
    return value.lower() in {"1", "y", "yes", "true"}


def is_instrumentation_enabled() -> bool:
    enabled = environ.get(OTEL_INSTRUMENTATION_RPC_HUB_ENABLED, "true")
    return is_true_value(enabled)


def parse_labels(labels_str: Optional[str]) -> Dict[str, str]:
    """
    Parse comma-separated ``key=value`` pairs.

    Args:
        labels_str: Label string, e.g. "env=prod,region=cn-hangzhou"

    Returns:
        Parsed labels; empty if input is empty
    """
    labels: Dict[str, str] = {}
    if not labels_str or not labels_str.strip():
        return labels

    for item in labels_str.split(","):
        item = item.strip()
        if not item:
            continue
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            _logger.warning("Ignoring malformed default label %r", item)
            continue
        labels[key] = value.strip()

    return labels


def get_default_labels() -> Dict[str, str]:
    return parse_labels(environ.get(OTEL_INSTRUMENTATION_RPC_HUB_DEFAULT_LABELS))
