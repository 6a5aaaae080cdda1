# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import json
import random
from typing import Any, Dict, List, Optional, TypedDict
from common.constants import (
    WEB_TRIGGER_RESPONSE_HEADERS, WEB_TRIGGER_STATUS_CODE, WEB_TRIGGER_STATUS_TEXT, REQUEST_ID_PREFIX
)
from customLogging.logger import safeLogger

logger = safeLogger(service_name="CommonModels")

class WebTriggerResponse(TypedDict):
    body: str
    headers: Dict[str, List[str]]
    statusCode: int
    statusText: str


def commonHeaders(rnd: Any) -> Dict[str, List[str]]:
    headers = {k: list(v) for k, v in WEB_TRIGGER_RESPONSE_HEADERS.items()}
    headers['X-Request-Id'] = [f"{REQUEST_ID_PREFIX}{rnd}"]
    return headers


def build_output(body: Any, rnd: Optional[Any] = None) -> WebTriggerResponse:
    """Wrap a payload in the web trigger envelope.

    The payload is nested under a "body" key inside the serialized body, so
    callers detect failure by checking for {"body": null}. The HTTP status is
    always 200.
    """
    if rnd is None:
        rnd = random.random()
    return WebTriggerResponse(
        body=json.dumps({"body": body}),
        headers=commonHeaders(rnd),
        statusCode=WEB_TRIGGER_STATUS_CODE,
        statusText=WEB_TRIGGER_STATUS_TEXT
    )


def success(body: Any) -> WebTriggerResponse:
    logger.info("Success response")
    return build_output(body)


def failure(reason: str = "Request failed") -> WebTriggerResponse:
    logger.error(f"Failure response: {reason}")
    return build_output(None)


#Define Assets Sync Custom Exceptions

class AssetsSyncError(Exception):
    pass

class RemoteApiError(AssetsSyncError):
    """Non-success HTTP status (or transport failure, status None) from the remote Assets API."""
    def __init__(self, status: Optional[int], message: str):
        super().__init__(f"Remote API Error ({status}): {message}")
        self.status = status
        self.message = message

class ParseError(AssetsSyncError):
    """Reserved. The tolerant request parser degrades instead of raising."""
    pass

class ReconciliationError(AssetsSyncError):
    """Raised when a missing object type cannot be created."""
    pass

class ConfigurationError(AssetsSyncError):
    pass
