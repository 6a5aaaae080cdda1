# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import base64
import requests
from typing import Any, Dict, List, Optional
from urllib.parse import quote, urljoin
from pydantic import ValidationError
from common.constants import (
    API_OBJECT_TYPES_FOR_SCHEMA, API_ATTRIBUTES_FOR_OBJECT_TYPE, API_CREATE_OBJECT_TYPE,
    API_CREATE_ATTRIBUTE, API_CREATE_OBJECT, API_OBJECT, API_AQL,
    AUTO_CREATED_DESCRIPTION_FORMAT, DEFAULT_QUERY_START_AT
)
from customLogging.logger import safeLogger
from models.assets import (
    AssetsApiConfigModel, ObjectTypeModel, AttributeDefinitionModel, AssetModel, AttributePayloadEntryModel
)
from models.common import RemoteApiError

logger = safeLogger(service_name="AssetsApiClient")


class AssetsApiClient:
    """HTTP client for the remote Assets REST API.

    Every request that fails raises RemoteApiError internally. The public
    operations then apply their own policy: listings degrade to an empty
    list, creations return None and deletion returns False. Nothing is retried.
    """

    def __init__(self, config: AssetsApiConfigModel, session: Optional[requests.Session] = None):
        self.config = config
        self.base_url = config.baseUrl.rstrip('/')
        self.session = session or requests.Session()
        self.session.headers.update(self._get_headers())

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        self.session.close()

    def _get_headers(self) -> Dict[str, str]:
        """Get request headers."""
        credentials = f"{self.config.email}:{self.config.apiToken.get_secret_value()}"
        auth_header = base64.b64encode(credentials.encode('utf-8')).decode('ascii')
        return {
            'Authorization': f"Basic {auth_header}",
            'Accept': 'application/json',
            'Content-Type': 'application/json',
        }

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """Make an HTTP request, raising RemoteApiError on transport failure or non-2xx status."""
        url = urljoin(self.base_url + '/', endpoint.lstrip('/'))
        if self.config.requestTimeout is not None:
            kwargs.setdefault('timeout', self.config.requestTimeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.exceptions.RequestException as e:
            raise RemoteApiError(None, f"{method} {endpoint} failed: {e}")

        if not response.ok:
            raise RemoteApiError(
                response.status_code,
                f"{method} {endpoint} - {response.reason} - {response.text}"
            )
        return response

    def get(self, endpoint: str, **kwargs) -> requests.Response:
        return self._make_request('GET', endpoint, **kwargs)

    def post(self, endpoint: str, data: Optional[Dict[str, Any]] = None, **kwargs) -> requests.Response:
        if data is not None:
            kwargs['json'] = data
        return self._make_request('POST', endpoint, **kwargs)

    def delete(self, endpoint: str, **kwargs) -> requests.Response:
        return self._make_request('DELETE', endpoint, **kwargs)

    #######################
    # Schema introspection
    #######################

    def list_object_types(self, object_schema_id: str) -> List[ObjectTypeModel]:
        """List the object types of a schema. Degrades to an empty list on any failure."""
        try:
            response = self.get(API_OBJECT_TYPES_FOR_SCHEMA.format(objectSchemaId=object_schema_id))
            object_types = response.json()
            if not isinstance(object_types, list):
                logger.error(f"Object types response is not an array: {object_types}")
                return []
            return [ObjectTypeModel(id=t['id'], name=t['name']) for t in object_types]
        except (RemoteApiError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Error fetching object types: {e}")
            return []

    def list_attributes(self, object_type_id: str) -> List[AttributeDefinitionModel]:
        """List the attributes defined on an object type. Degrades to an empty list on any failure."""
        try:
            response = self.get(API_ATTRIBUTES_FOR_OBJECT_TYPE.format(objectTypeId=object_type_id))
            attributes = response.json()
            if not isinstance(attributes, list):
                logger.error(f"Attributes response is not an array: {attributes}")
                return []
            return [AttributeDefinitionModel(id=a['id'], name=a['name']) for a in attributes]
        except (RemoteApiError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Error fetching attributes: {e}")
            return []

    #######################
    # Schema creation
    #######################

    def create_object_type(self, object_schema_id: str, name: str) -> Optional[str]:
        """Create a non-abstract, non-inherited object type. Returns its id, or None on failure."""
        payload = {
            'inherited': False,
            'abstractObjectType': False,
            'objectSchemaId': object_schema_id,
            'iconId': self.config.defaultIconId,
            'name': name,
            'description': AUTO_CREATED_DESCRIPTION_FORMAT.format(name=name),
        }
        try:
            response = self.post(API_CREATE_OBJECT_TYPE, data=payload)
            object_type_id = response.json().get('id')
        except (RemoteApiError, ValueError, AttributeError) as e:
            logger.error(f"Failed to create object type {name}: {e}")
            return None

        if object_type_id is None:
            logger.error(f"Create object type {name} returned no id")
            return None
        logger.info(f"Successfully created object type: {name}")
        return str(object_type_id)

    def create_attribute(self, object_type_id: str, name: str) -> Optional[str]:
        """Create an attribute of the default type on an object type. Returns its id, or None on failure."""
        payload = {
            'name': name,
            'type': self.config.defaultAttributeType,
            'defaultTypeId': self.config.defaultAttributeType,
        }
        try:
            response = self.post(API_CREATE_ATTRIBUTE.format(objectTypeId=object_type_id), data=payload)
            attribute_id = response.json().get('id')
        except (RemoteApiError, ValueError, AttributeError) as e:
            logger.error(f"Error creating object type attribute {name}: {e}")
            return None

        if attribute_id is None:
            logger.error(f"Create attribute {name} returned no id")
            return None
        logger.info(f"Attribute created: {name}")
        return str(attribute_id)

    #######################
    # Assets
    #######################

    def create_asset(self, object_type_id: str, attributes: List[AttributePayloadEntryModel]) -> Optional[AssetModel]:
        """Create an asset. Returns the created asset record, or None on failure."""
        payload = {
            'objectTypeId': object_type_id,
            'attributes': [entry.model_dump() for entry in attributes],
        }
        try:
            response = self.post(API_CREATE_OBJECT, data=payload)
            return AssetModel.model_validate(response.json())
        except (RemoteApiError, ValueError, ValidationError) as e:
            logger.error(f"Error creating asset: {e}")
            return None

    def delete_asset(self, object_id: str) -> bool:
        """Delete an asset by id. Never raises; returns whether the delete succeeded."""
        try:
            # ids are a single path segment
            self.delete(API_OBJECT.format(objectId=quote(str(object_id), safe='')))
        except RemoteApiError as e:
            logger.error(f"Error deleting asset with ID {object_id}: {e}")
            return False
        logger.info(f"Successfully deleted asset with ID: {object_id}")
        return True

    def query_assets(self, ql_query: str, start_at: int = DEFAULT_QUERY_START_AT,
                     max_results: Optional[int] = None) -> List[AssetModel]:
        """Run an AQL query and return a single page of assets with their attributes.

        Only the first page is requested; the page size defaults to the configured
        pageSize. Degrades to an empty list on any failure.
        """
        params = {
            'startAt': start_at,
            'maxResults': max_results if max_results is not None else self.config.pageSize,
            'includeAttributes': 'true',
        }
        try:
            response = self.post(API_AQL, data={'qlQuery': ql_query}, params=params)
            values = response.json().get('values') or []
            if not isinstance(values, list):
                logger.error(f"AQL values is not an array: {values}")
                return []
            return [AssetModel.model_validate(value) for value in values]
        except (RemoteApiError, ValueError, AttributeError, ValidationError) as e:
            logger.error(f"Error fetching assets for query {ql_query}: {e}")
            return []
