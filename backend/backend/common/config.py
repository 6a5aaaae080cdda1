# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import os
from botocore.exceptions import ClientError
from pydantic import ValidationError
from common import get_ssm_parameter_value
from common.constants import DEFAULT_NETWORK_ASSETS_OBJECT_TYPE
from customLogging.logger import safeLogger
from models.assets import AssetsApiConfigModel
from models.common import ConfigurationError

logger = safeLogger(service_name="AssetsApiConfig")

# Environment variables; optional ones fall back to model defaults
ENV_WORKSPACE_ID = "ASSETS_WORKSPACE_ID"
ENV_API_EMAIL = "ASSETS_API_EMAIL"
ENV_API_TOKEN_SSM_PARAM = "ASSETS_API_TOKEN_SSM_PARAM"
ENV_API_TOKEN = "ASSETS_API_TOKEN"
ENV_OBJECT_SCHEMA_ID = "ASSETS_OBJECT_SCHEMA_ID"
ENV_BASE_URL = "ASSETS_API_BASE_URL"
ENV_QUERY_PAGE_SIZE = "ASSETS_QUERY_PAGE_SIZE"
ENV_DEFAULT_ICON_ID = "ASSETS_DEFAULT_ICON_ID"
ENV_REQUEST_TIMEOUT = "ASSETS_REQUEST_TIMEOUT"
ENV_NETWORK_ASSETS_OBJECT_TYPE = "NETWORK_ASSETS_OBJECT_TYPE"

OPTIONAL_SETTINGS = {
    ENV_OBJECT_SCHEMA_ID: 'objectSchemaId',
    ENV_BASE_URL: 'baseUrl',
    ENV_QUERY_PAGE_SIZE: 'pageSize',
    ENV_DEFAULT_ICON_ID: 'defaultIconId',
    ENV_REQUEST_TIMEOUT: 'requestTimeout',
}


def load_api_token(env=os.environ) -> str:
    """Read the API token from SSM when a parameter name is configured, else from the environment."""
    parameter_name = env.get(ENV_API_TOKEN_SSM_PARAM)
    if parameter_name:
        try:
            token = get_ssm_parameter_value(parameter_name, with_decryption=True)
        except ClientError as e:
            logger.exception(f"Error getting SSM parameter {parameter_name}: {e}")
            raise ConfigurationError(f"Error getting configuration parameter: {parameter_name}")
        if not token:
            raise ConfigurationError(f"Configuration parameter {parameter_name} has no value")
        return token

    token = env.get(ENV_API_TOKEN)
    if not token:
        raise ConfigurationError(f"Either {ENV_API_TOKEN_SSM_PARAM} or {ENV_API_TOKEN} must be set")
    return token


def load_assets_api_config(env=os.environ) -> AssetsApiConfigModel:
    """Build the Assets API configuration for one invocation"""
    missing = [name for name in (ENV_WORKSPACE_ID, ENV_API_EMAIL) if not env.get(name)]
    if missing:
        raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

    settings = {
        'workspaceId': env[ENV_WORKSPACE_ID],
        'email': env[ENV_API_EMAIL],
        'apiToken': load_api_token(env),
    }
    for env_name, field_name in OPTIONAL_SETTINGS.items():
        if env.get(env_name):
            settings[field_name] = env[env_name]

    try:
        return AssetsApiConfigModel(**settings)
    except ValidationError as v:
        # input values are left out so the token never reaches the logs
        message = "; ".join(error['msg'] for error in v.errors(include_input=False))
        logger.error(f"Invalid Assets API configuration: {message}")
        raise ConfigurationError(f"Invalid Assets API configuration: {message}") from None


def get_network_assets_object_type(env=os.environ) -> str:
    return env.get(ENV_NETWORK_ASSETS_OBJECT_TYPE) or DEFAULT_NETWORK_ASSETS_OBJECT_TYPE
