# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

# Remote Assets REST API
DEFAULT_BASE_URL_FORMAT = "https://api.atlassian.com/jsm/assets/workspace/{workspaceId}/v1"

API_OBJECT_TYPES_FOR_SCHEMA = "objectschema/{objectSchemaId}/objecttypes"
API_ATTRIBUTES_FOR_OBJECT_TYPE = "objecttype/{objectTypeId}/attributes"
API_CREATE_OBJECT_TYPE = "objecttype/create"
API_CREATE_ATTRIBUTE = "objecttypeattribute/{objectTypeId}/"
API_CREATE_OBJECT = "object/create"
API_OBJECT = "object/{objectId}"
API_AQL = "object/aql"

# Defaults for schema elements created on demand
DEFAULT_OBJECT_SCHEMA_ID = "11"
DEFAULT_ICON_ID = "13"
DEFAULT_ATTRIBUTE_TYPE = "0"
AUTO_CREATED_DESCRIPTION_FORMAT = "Auto-created object type: {name}"

# AQL queries only ever fetch the first page
DEFAULT_QUERY_START_AT = 0
DEFAULT_QUERY_PAGE_SIZE = 5
AQL_OBJECT_TYPE_QUERY_FORMAT = 'objectType = "{name}"'

DEFAULT_NETWORK_ASSETS_OBJECT_TYPE = "Network Assets"

# Attribute names never copied into flattened asset records
EXCLUDED_FLATTENED_ATTRIBUTES = ["objectKey", "Key"]

# Web trigger response envelope. Status is always 200; failures carry a null body.
WEB_TRIGGER_RESPONSE_HEADERS = {
    'Content-Type': ['application/json'],
}
WEB_TRIGGER_STATUS_CODE = 200
WEB_TRIGGER_STATUS_TEXT = "OK"
REQUEST_ID_PREFIX = "rnd-"
