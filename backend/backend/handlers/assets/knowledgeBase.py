# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Dict, List
from aws_lambda_powertools.utilities.typing import LambdaContext
from common.assetFormatter import flatten_assets
from common.assetsApi import AssetsApiClient
from common.config import load_assets_api_config
from common.constants import AQL_OBJECT_TYPE_QUERY_FORMAT
from customLogging.logger import safeLogger
from models.common import WebTriggerResponse, success, failure

logger = safeLogger(service_name="KnowledgeBase")


def export_schema_assets(client: AssetsApiClient, object_schema_id: str) -> List[Dict[str, Any]]:
    """Flattened assets of every object type in the schema, one page per type.

    Records carry attribute values only; asset ids and "id" attributes are
    left out. A failing object type is logged and skipped.
    """
    all_assets = []
    for object_type in client.list_object_types(object_schema_id):
        try:
            attributes = client.list_attributes(object_type.id)
            assets = client.query_assets(AQL_OBJECT_TYPE_QUERY_FORMAT.format(name=object_type.name))
            all_assets.extend(flatten_assets(assets, attributes, include_asset_id=False))
        except Exception as e:
            logger.error(f"Error fetching assets for object type {object_type.name}: {e}")

    return all_assets


def lambda_handler(event, context: LambdaContext) -> WebTriggerResponse:
    """Web trigger exporting the schema's assets as plain records"""
    try:
        config = load_assets_api_config()
        with AssetsApiClient(config) as client:
            all_assets = export_schema_assets(client, config.objectSchemaId)
        return success(all_assets)
    except Exception as e:
        logger.exception(f"Error in KnowledgeBaseWebhook: {e}")
        return failure("Error exporting assets")
