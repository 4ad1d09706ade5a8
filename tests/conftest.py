"""
Pytest configuration and shared fixtures for the Merkle infos stack tests.
"""

import json
import os
import zipfile

import pytest
import aws_cdk as cdk
from aws_cdk.assertions import Template

from merkle_infos import config
from merkle_infos.merkle_infos_stack import MerkleInfosStack

CDK_JSON = os.path.join(os.path.dirname(__file__), "..", "cdk.json")


@pytest.fixture(scope="session")
def cdk_context():
    """Feature flags the CDK CLI passes to app.py from cdk.json."""
    with open(CDK_JSON) as f:
        return json.load(f)["context"]


@pytest.fixture
def code_asset(tmp_path):
    """Write a stand-in custom runtime archive."""
    archive = tmp_path / "lambda.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("bootstrap", "#!/bin/sh\necho placeholder\n")
    return str(archive)


@pytest.fixture
def synth_stack(code_asset, cdk_context):
    """Return a factory building a fresh app + stack against the fixture archive."""

    def _build():
        app = cdk.App(context=cdk_context)
        return MerkleInfosStack(
            app,
            config.STACK_NAME,
            code_asset_path=code_asset,
            env=config.DEPLOYMENT_TARGET.to_environment(),
            description=config.STACK_DESCRIPTION,
        )

    return _build


@pytest.fixture
def stack(synth_stack):
    return synth_stack()


@pytest.fixture
def template(stack):
    return Template.from_stack(stack)
