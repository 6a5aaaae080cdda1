# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import json
import re
from typing import Any, Dict
from customLogging.logger import safeLogger

logger = safeLogger(service_name="RequestParser")

# Legacy quasi-JSON payloads, e.g. {"objectType": Servers, "attributes": {Name=web-01, Status=Active}}
legacy_object_type_regex = re.compile(r'"objectType":\s*(\w+)')
legacy_attributes_regex = re.compile(r'attributes":\s*{([^}]+)}')


def parse_legacy_request(raw: str) -> Dict[str, Any]:
    """Best-effort extraction of objectType and attributes from a malformed request string.

    Attribute pairs are split on ',' then '='. A pair is kept when it has a
    non-empty name and a value part (which may be empty). Anything that does
    not match is dropped.
    """
    parsed = {}

    object_type_match = legacy_object_type_regex.search(raw)
    if object_type_match:
        parsed['objectType'] = object_type_match.group(1)

    attributes_match = legacy_attributes_regex.search(raw)
    if attributes_match:
        parsed['attributes'] = {}
        for pair in attributes_match.group(1).split(','):
            parts = [part.strip() for part in pair.strip().split('=')]
            key = parts[0]
            if key and len(parts) > 1:
                parsed['attributes'][key] = parts[1]

    return parsed


def parse_request(raw: Any) -> Any:
    """Normalize an inbound payload into a request mapping. Never raises.

    Mappings are returned unchanged. Strings are parsed as JSON first and fall
    back to legacy extraction when that fails. Everything else yields {}.
    """
    if isinstance(raw, dict):
        return raw

    if not isinstance(raw, str):
        return {}

    try:
        return json.loads(raw)
    except ValueError:
        logger.info("Could not parse as standard JSON, trying alternative parsing")

    try:
        return parse_legacy_request(raw)
    except Exception as e:
        logger.error(f"Error parsing request: {e}")
        return {}
