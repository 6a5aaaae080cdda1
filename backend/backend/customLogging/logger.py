# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging.formatter import LambdaPowertoolsFormatter

location_format = "[%(funcName)s] %(module)s"
date_format = "%m/%d/%Y %I:%M:%S %p"

# matched case-insensitively at any depth
KEYS_TO_REDACT = ["authorization", "apitoken", "api_token"]


def mask_sensitive_data(event):
    # remove credentials from log records before they are serialized
    result = {}
    for k, v in event.items():
        if isinstance(v, dict):
            result[k] = mask_sensitive_data(v)
        elif isinstance(k, str) and k.lower() in KEYS_TO_REDACT:
            result[k] = "<redacted>"
        else:
            result[k] = v
    return result


class CustomFormatter(LambdaPowertoolsFormatter):
    def serialize(self, log: dict) -> str:
        """Serialize final structured log dict to JSON str"""
        log = mask_sensitive_data(event=log)
        return self.json_serializer(log)


def safeLogger(**kwargs):
    return Logger(
        logger_formatter=CustomFormatter(),
        location=location_format,
        datefmt=date_format,
        **kwargs)
