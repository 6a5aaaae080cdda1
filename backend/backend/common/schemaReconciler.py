# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import List, Optional, Tuple
from common.assetsApi import AssetsApiClient
from customLogging.logger import safeLogger
from models.assets import (
    AssetUpsertRequestModel, AttributeDefinitionModel, AttributePayloadEntryModel,
    ObjectAttributeValueModel, ObjectTypeModel
)
from models.common import ReconciliationError

logger = safeLogger(service_name="SchemaReconciler")


def find_by_name(items, name: str):
    """Case-insensitive name lookup; first match wins"""
    wanted = name.lower()
    for item in items:
        if item.name.lower() == wanted:
            return item
    return None


def resolve_object_type(client: AssetsApiClient, object_schema_id: str, name: str) -> ObjectTypeModel:
    object_types = client.list_object_types(object_schema_id)
    logger.info(f"Found {len(object_types)} object types")

    object_type = find_by_name(object_types, name)
    if object_type:
        logger.info(f"Found object type: {name} with ID: {object_type.id}")
        return object_type

    logger.info(f"Object type {name} not found, creating it.")
    object_type_id = client.create_object_type(object_schema_id, name)
    if not object_type_id:
        raise ReconciliationError(f"Failed to create object type: {name}")
    return ObjectTypeModel(id=object_type_id, name=name)


def resolve_attribute_id(client: AssetsApiClient, object_type_id: str,
                         existing_attributes: List[AttributeDefinitionModel], name: str) -> Optional[str]:
    existing = find_by_name(existing_attributes, name)
    if existing:
        logger.info(f"Using existing attribute: {name} with ID: {existing.id}")
        return existing.id

    logger.info(f"Creating missing attribute: {name}")
    attribute_id = client.create_attribute(object_type_id, name)
    if not attribute_id:
        logger.error(f"Failed to create attribute: {name}")
        return None
    logger.info(f"Created new attribute: {name} with ID: {attribute_id}")
    # a later key differing only in case reuses this attribute
    existing_attributes.append(AttributeDefinitionModel(id=attribute_id, name=name))
    return attribute_id


def reconcile_schema(client: AssetsApiClient, object_schema_id: str,
                     request: AssetUpsertRequestModel) -> Tuple[str, List[AttributePayloadEntryModel]]:
    """Make sure the requested object type and attributes exist remotely.

    Returns the object type id and the attribute payload for creating the
    asset, in request order. Attributes that cannot be created are skipped.
    Keys resolving to the same attribute produce one entry; the last value wins.
    Raises ReconciliationError when a missing object type cannot be created,
    before any attribute is looked up. Nothing created here is rolled back.
    """
    object_type = resolve_object_type(client, object_schema_id, request.objectType)

    existing_attributes = client.list_attributes(object_type.id)

    attributes_payload = {}
    for name, value in request.attributes.items():
        if not name or value is None:
            logger.warning(f"Skipping attribute without a name or value: {name}")
            continue

        attribute_id = resolve_attribute_id(client, object_type.id, existing_attributes, name)
        if not attribute_id:
            continue

        attributes_payload[attribute_id] = AttributePayloadEntryModel(
            objectTypeAttributeId=attribute_id,
            objectAttributeValues=[ObjectAttributeValueModel(value=value)]
        )

    return object_type.id, list(attributes_payload.values())
