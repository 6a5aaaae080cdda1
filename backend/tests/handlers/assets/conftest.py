# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest
from unittest.mock import patch


@pytest.fixture
def patch_client(remote_store):
    """Route a handler module's AssetsApiClient to the in-memory remote store"""
    patchers = []

    def _patch(module_name):
        patcher = patch(f"{module_name}.AssetsApiClient", return_value=remote_store)
        patchers.append(patcher)
        return patcher.start()

    yield _patch

    for patcher in patchers:
        patcher.stop()
