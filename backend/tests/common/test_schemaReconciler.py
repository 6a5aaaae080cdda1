# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from common.schemaReconciler import reconcile_schema, find_by_name
from models.assets import AssetUpsertRequestModel, ObjectTypeModel
from models.common import ReconciliationError

SCHEMA_ID = "11"


def upsert_request(object_type, attributes):
    return AssetUpsertRequestModel(objectType=object_type, attributes=attributes)


def payload_as_dict(payload):
    return {entry.objectTypeAttributeId: entry.objectAttributeValues[0].value for entry in payload}


class TestFindByName:

    def test_match_is_case_insensitive(self):
        items = [ObjectTypeModel(id="1", name="Servers"), ObjectTypeModel(id="2", name="Network Assets")]
        assert find_by_name(items, "network assets").id == "2"

    def test_no_match(self):
        assert find_by_name([ObjectTypeModel(id="1", name="Servers")], "Laptops") is None


class TestReconcileSchema:

    def test_existing_object_type_and_attributes_are_reused(self, remote_store):
        servers = remote_store.add_object_type(SCHEMA_ID, "Servers")
        name_attr = remote_store.add_attribute(servers.id, "Name")
        status_attr = remote_store.add_attribute(servers.id, "Status")

        object_type_id, payload = reconcile_schema(
            remote_store, SCHEMA_ID, upsert_request("SERVERS", {"name": "web-01", "STATUS": "Active"}))

        assert object_type_id == servers.id
        assert payload_as_dict(payload) == {name_attr.id: "web-01", status_attr.id: "Active"}
        assert remote_store.operations("create_object_type") == []
        assert remote_store.operations("create_attribute") == []

    def test_missing_object_type_and_attributes_are_created(self, remote_store):
        object_type_id, payload = reconcile_schema(
            remote_store, SCHEMA_ID, upsert_request("Laptops", {"Owner": "alice", "Model": "X1"}))

        assert remote_store.operations("create_object_type") == [(SCHEMA_ID, "Laptops")]
        assert remote_store.operations("create_attribute") == [(object_type_id, "Owner"), (object_type_id, "Model")]
        assert [a.name for a in remote_store.attributes[object_type_id]] == ["Owner", "Model"]
        assert len(payload) == 2

    def test_payload_follows_request_order(self, remote_store):
        servers = remote_store.add_object_type(SCHEMA_ID, "Servers")
        b_attr = remote_store.add_attribute(servers.id, "b")
        a_attr = remote_store.add_attribute(servers.id, "a")

        _, payload = reconcile_schema(remote_store, SCHEMA_ID, upsert_request("Servers", {"a": "1", "b": "2"}))

        assert [entry.objectTypeAttributeId for entry in payload] == [a_attr.id, b_attr.id]
        assert payload[0].model_dump() == {
            "objectTypeAttributeId": a_attr.id,
            "objectAttributeValues": [{"value": "1"}],
        }

    def test_second_run_creates_nothing(self, remote_store):
        request = upsert_request("Laptops", {"Owner": "alice", "Model": "X1"})

        first_type_id, first_payload = reconcile_schema(remote_store, SCHEMA_ID, request)
        creations = len(remote_store.operations("create_object_type")) + len(remote_store.operations("create_attribute"))

        second_type_id, second_payload = reconcile_schema(
            remote_store, SCHEMA_ID, upsert_request("laptops", {"OWNER": "bob", "model": "X2"}))

        assert second_type_id == first_type_id
        assert len(remote_store.object_types[SCHEMA_ID]) == 1
        assert len(remote_store.attributes[first_type_id]) == 2
        assert [e.objectTypeAttributeId for e in second_payload] == [e.objectTypeAttributeId for e in first_payload]
        assert creations == 3
        assert len(remote_store.operations("create_object_type")) + len(remote_store.operations("create_attribute")) == 3

    def test_failed_attribute_is_skipped(self, remote_store):
        servers = remote_store.add_object_type(SCHEMA_ID, "Servers")
        remote_store.add_attribute(servers.id, "Name")
        remote_store.fail_create_attribute_names = {"Rack"}

        _, payload = reconcile_schema(
            remote_store, SCHEMA_ID, upsert_request("Servers", {"Name": "web-01", "Rack": "R1", "Status": "Active"}))

        names_by_id = {a.id: a.name for a in remote_store.attributes[servers.id]}
        assert [names_by_id[e.objectTypeAttributeId] for e in payload] == ["Name", "Status"]

    def test_object_type_creation_failure_is_fatal(self, remote_store):
        remote_store.fail_create_object_type = True

        with pytest.raises(ReconciliationError):
            reconcile_schema(remote_store, SCHEMA_ID, upsert_request("Laptops", {"Owner": "alice"}))

        assert remote_store.operations("list_attributes") == []
        assert remote_store.operations("create_attribute") == []

    def test_attributes_listed_once_per_request(self, remote_store):
        reconcile_schema(remote_store, SCHEMA_ID, upsert_request("Laptops", {"a": "1", "b": "2", "c": "3"}))
        assert len(remote_store.operations("list_attributes")) == 1
        assert len(remote_store.operations("list_object_types")) == 1

    def test_keys_differing_in_case_share_one_attribute(self, remote_store):
        servers = remote_store.add_object_type(SCHEMA_ID, "Servers")

        _, payload = reconcile_schema(
            remote_store, SCHEMA_ID, upsert_request("Servers", {"Status": "Active", "status": "Retired"}))

        assert remote_store.operations("create_attribute") == [(servers.id, "Status")]
        assert len(payload) == 1
        assert payload[0].objectAttributeValues[0].value == "Retired"

    def test_duplicate_keys_keep_first_position(self, remote_store):
        servers = remote_store.add_object_type(SCHEMA_ID, "Servers")
        status_attr = remote_store.add_attribute(servers.id, "Status")
        name_attr = remote_store.add_attribute(servers.id, "Name")

        _, payload = reconcile_schema(
            remote_store, SCHEMA_ID, upsert_request("Servers", {"STATUS": "Active", "Name": "web-01", "status": "Retired"}))

        assert payload_as_dict(payload) == {status_attr.id: "Retired", name_attr.id: "web-01"}
        assert [e.objectTypeAttributeId for e in payload] == [status_attr.id, name_attr.id]

    def test_null_values_are_skipped(self, remote_store):
        _, payload = reconcile_schema(
            remote_store, SCHEMA_ID, upsert_request("Servers", {"Name": "web-01", "Rack": None}))

        assert len(payload) == 1
        assert [args[1] for args in remote_store.operations("create_attribute")] == ["Name"]

    def test_empty_introspection_recreates_attributes(self, remote_store):
        # a failed attribute listing degrades to [] and every attribute looks missing
        servers = remote_store.add_object_type(SCHEMA_ID, "Servers")
        remote_store.add_attribute(servers.id, "Name")
        remote_store.list_attributes = lambda object_type_id: []

        reconcile_schema(remote_store, SCHEMA_ID, upsert_request("Servers", {"Name": "web-01"}))

        assert remote_store.operations("create_attribute") == [(servers.id, "Name")]
