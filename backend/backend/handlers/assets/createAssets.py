# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import json
from typing import Optional
from aws_lambda_powertools.utilities.typing import LambdaContext
from aws_lambda_powertools.utilities.parser import parse
from pydantic import ValidationError
from common.assetsApi import AssetsApiClient
from common.config import load_assets_api_config
from common.requestParser import parse_request
from common.schemaReconciler import reconcile_schema
from common.validators import validate
from customLogging.logger import safeLogger
from models.assets import AssetModel, AssetUpsertRequestModel
from models.common import WebTriggerResponse, ConfigurationError, ReconciliationError, success, failure

logger = safeLogger(service_name="CreateAssets")

#######################
# Utility Functions
#######################

def process_request(client: AssetsApiClient, object_schema_id: str, request_model: AssetUpsertRequestModel,
                    superseded_asset_id: Optional[str] = None) -> Optional[AssetModel]:
    """Reconcile the schema, create the asset, then delete the asset it supersedes.

    Returns the created asset, or None when creation failed. The delete is
    best effort and only attempted after a successful create.
    """
    object_type_id, attributes_payload = reconcile_schema(client, object_schema_id, request_model)

    logger.info(f"Creating asset with {len(attributes_payload)} attributes")
    created_asset = client.create_asset(object_type_id, attributes_payload)

    if superseded_asset_id and created_asset:
        (valid, message) = validate({
            'supersededAssetId': {
                'value': superseded_asset_id,
                'validator': 'NUMERIC_ID'
            }
        })
        if not valid:
            logger.warning(f"Skipping delete of old object: {message}")
            return created_asset

        logger.info(f"Attempting to delete old object with ID: {superseded_asset_id}")
        if client.delete_asset(superseded_asset_id):
            logger.info(f"Successfully deleted old object with ID: {superseded_asset_id}")
        else:
            logger.warning(f"Failed to delete old object with ID: {superseded_asset_id}")

    return created_asset

#######################
# Lambda Handler
#######################

def lambda_handler(event, context: LambdaContext) -> WebTriggerResponse:
    """Web trigger that upserts one asset, creating missing object types and attributes"""
    try:
        body = event['body']
        if isinstance(body, str):
            try:
                body = json.loads(body)
            except ValueError:
                # legacy callers send the quasi-JSON request without string encoding
                logger.info("Request body is not JSON, passing it to the request parser as is")

        parsed_request = parse_request(body)
        request_model = parse(parsed_request, model=AssetUpsertRequestModel)

        config = load_assets_api_config()
        with AssetsApiClient(config) as client:
            created_asset = process_request(client, config.objectSchemaId, request_model,
                                            request_model.supersededAssetId)

        if created_asset is None:
            return failure("Asset creation failed")
        return success(created_asset.model_dump(mode='json'))

    except ValidationError as v:
        logger.exception(f"Validation error: {v}")
        return failure("Invalid request")
    except ReconciliationError as r:
        logger.exception(f"Reconciliation error: {r}")
        return failure("Schema reconciliation failed")
    except ConfigurationError as c:
        logger.exception(f"Configuration error: {c}")
        return failure("Invalid configuration")
    except Exception as e:
        logger.exception(f"Error processing request: {e}")
        return failure("Internal error")
