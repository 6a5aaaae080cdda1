# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Dict, List
from common.constants import EXCLUDED_FLATTENED_ATTRIBUTES
from models.assets import AssetModel, AttributeDefinitionModel


def attribute_name_map(attributes: List[AttributeDefinitionModel]) -> Dict[str, str]:
    return {attribute.id: attribute.name for attribute in attributes}


def flatten_asset(asset: AssetModel, attribute_names: Dict[str, str], include_asset_id: bool = False) -> Dict[str, Any]:
    """Flatten an asset's attribute list into a {name: first value} record.

    Keys come out in alphabetical order. Attributes with an unknown id or an
    empty first value are dropped, as are objectKey and Key. With
    include_asset_id the asset's own id is added under "id" when no "id"
    attribute is present; without it any "id" attribute is dropped too.
    """
    attribute_data = {}
    for attribute in asset.attributes:
        name = attribute_names.get(attribute.objectTypeAttributeId)
        value = attribute.first_value()
        if name and value:
            attribute_data[name] = value

    excluded = list(EXCLUDED_FLATTENED_ATTRIBUTES)
    if not include_asset_id:
        excluded.append('id')

    result = {}
    for name in sorted(attribute_data.keys()):
        if name not in excluded:
            result[name] = attribute_data[name]

    if include_asset_id and not result.get('id') and asset.id:
        result['id'] = asset.id

    return result


def flatten_assets(assets: List[AssetModel], attributes: List[AttributeDefinitionModel],
                   include_asset_id: bool = False) -> List[Dict[str, Any]]:
    names = attribute_name_map(attributes)
    return [flatten_asset(asset, names, include_asset_id) for asset in assets]
