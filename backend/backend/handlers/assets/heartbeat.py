# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import random
from aws_lambda_powertools.utilities.typing import LambdaContext
from models.common import WebTriggerResponse, build_output


def lambda_handler(event, context: LambdaContext) -> WebTriggerResponse:
    """Synchronous trigger answering with a random number, used to check the trigger is reachable"""
    return build_output(random.random())
