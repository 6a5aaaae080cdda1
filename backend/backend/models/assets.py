# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, SecretStr, field_validator, model_validator
from common.constants import (
    DEFAULT_BASE_URL_FORMAT, DEFAULT_OBJECT_SCHEMA_ID, DEFAULT_ICON_ID,
    DEFAULT_ATTRIBUTE_TYPE, DEFAULT_QUERY_PAGE_SIZE
)
from common.validators import validate
from customLogging.logger import safeLogger

logger = safeLogger(service_name="AssetModels")


def coerce_to_str(value):
    """Remote ids and request values arrive as str, int, float or bool; store them as str."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


######################## Remote Schema Models ##########################
class ObjectTypeModel(BaseModel, extra='allow'):
    """Schema-level category of assets"""
    id: str
    name: str

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        return coerce_to_str(v)


class AttributeDefinitionModel(BaseModel, extra='allow'):
    """Attribute defined on one object type"""
    id: str
    name: str

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        return coerce_to_str(v)


######################## Remote Asset Models ##########################
class ObjectAttributeValueModel(BaseModel, extra='allow'):
    value: Optional[Any] = None


class AssetAttributeModel(BaseModel, extra='allow'):
    objectTypeAttributeId: Optional[str] = None
    objectAttributeValues: List[ObjectAttributeValueModel] = []

    @field_validator('objectTypeAttributeId', mode='before')
    @classmethod
    def coerce_id(cls, v):
        return coerce_to_str(v)

    @field_validator('objectAttributeValues', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return v or []

    def first_value(self) -> Optional[Any]:
        if not self.objectAttributeValues:
            return None
        return self.objectAttributeValues[0].value


class AssetObjectTypeRefModel(BaseModel, extra='allow'):
    id: Optional[str] = None

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        return coerce_to_str(v)


class AssetModel(BaseModel, extra='allow'):
    """Asset (object) as returned by the remote API. Unknown fields are preserved."""
    id: Optional[str] = None
    objectType: Optional[AssetObjectTypeRefModel] = None
    attributes: List[AssetAttributeModel] = []

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        return coerce_to_str(v)

    @field_validator('attributes', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return v or []


######################## Create Asset Models ##########################
class AttributePayloadEntryModel(BaseModel, extra='ignore'):
    """One attribute value written when creating an asset"""
    objectTypeAttributeId: str
    objectAttributeValues: List[ObjectAttributeValueModel]


class AssetUpsertRequestModel(BaseModel, extra='ignore'):
    """Canonical parsed upsert request"""
    objectType: str = Field(min_length=1)
    attributes: Dict[str, Optional[str]]

    @field_validator('objectType', mode='before')
    @classmethod
    def coerce_object_type(cls, v):
        return coerce_to_str(v)

    @field_validator('attributes', mode='before')
    @classmethod
    def coerce_attribute_values(cls, v):
        if not isinstance(v, dict):
            return v
        return {str(k): coerce_to_str(value) for k, value in v.items()}

    @property
    def supersededAssetId(self) -> Optional[str]:
        """Id of an existing asset this request replaces, carried in attributes.id"""
        return self.attributes.get('id') or None


######################## Configuration Models ##########################
class AssetsApiConfigModel(BaseModel, extra='ignore'):
    """Connection settings for the remote Assets API"""
    workspaceId: str
    email: str
    apiToken: SecretStr
    objectSchemaId: str = DEFAULT_OBJECT_SCHEMA_ID
    baseUrl: Optional[str] = None
    pageSize: int = Field(default=DEFAULT_QUERY_PAGE_SIZE, ge=1)
    defaultIconId: str = DEFAULT_ICON_ID
    defaultAttributeType: str = DEFAULT_ATTRIBUTE_TYPE
    requestTimeout: Optional[float] = Field(default=None, gt=0)

    @model_validator(mode='after')
    def validate_fields(self):
        """Validate fields that require more scrutiny"""
        (valid, message) = validate({
            'workspaceId': {
                'value': self.workspaceId,
                'validator': 'UUID'
            },
            'email': {
                'value': self.email,
                'validator': 'EMAIL'
            },
            'apiToken': {
                'value': self.apiToken.get_secret_value(),
                'validator': 'STRING_256'
            },
            'objectSchemaId': {
                'value': self.objectSchemaId,
                'validator': 'NUMERIC_ID'
            },
            'baseUrl': {
                'value': self.baseUrl,
                'validator': 'URL',
                'optional': True
            }
        })
        if not valid:
            logger.error(message)
            raise ValueError(message)

        if not self.baseUrl:
            self.baseUrl = DEFAULT_BASE_URL_FORMAT.format(workspaceId=self.workspaceId)
        self.baseUrl = self.baseUrl.rstrip('/')
        return self
