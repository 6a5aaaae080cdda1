# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import boto3


def get_ssm_parameter_value(parameter_name, with_decryption=True, region=None):
    ssm = boto3.client('ssm', region_name=region)
    param = ssm.get_parameter(
        Name=parameter_name,
        WithDecryption=with_decryption
    )
    return param.get("Parameter", {}).get("Value")
