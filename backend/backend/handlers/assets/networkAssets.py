# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Dict, List
from aws_lambda_powertools.utilities.typing import LambdaContext
from common.assetFormatter import flatten_assets
from common.assetsApi import AssetsApiClient
from common.config import load_assets_api_config, get_network_assets_object_type
from common.constants import AQL_OBJECT_TYPE_QUERY_FORMAT
from customLogging.logger import safeLogger
from models.common import WebTriggerResponse, success, failure

logger = safeLogger(service_name="NetworkAssets")


def get_network_assets(client: AssetsApiClient, object_type_name: str) -> List[Dict[str, Any]]:
    """First page of assets of one object type, flattened and keyed by attribute name"""
    assets = client.query_assets(AQL_OBJECT_TYPE_QUERY_FORMAT.format(name=object_type_name))
    if not assets:
        logger.info(f"No assets found for object type {object_type_name}")
        return []

    # attribute names are resolved from the first asset's object type
    first_object_type = assets[0].objectType
    object_type_id = first_object_type.id if first_object_type else None
    attributes = client.list_attributes(object_type_id) if object_type_id else []

    return flatten_assets(assets, attributes, include_asset_id=True)


def lambda_handler(event, context: LambdaContext) -> WebTriggerResponse:
    """Web trigger listing the network assets"""
    try:
        config = load_assets_api_config()
        with AssetsApiClient(config) as client:
            network_assets = get_network_assets(client, get_network_assets_object_type())
        return success({"networkAssets": network_assets})
    except Exception as e:
        logger.exception(f"Error fetching assets: {e}")
        return failure("Error fetching assets")
