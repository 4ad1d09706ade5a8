"""
Merkle Infos deployment configuration

Fixed identifiers for the single stack this app synthesizes.
"""

import os
from dataclasses import dataclass

import aws_cdk as cdk


@dataclass(frozen=True)
class DeploymentTarget:
    account: str
    region: str

    def to_environment(self) -> cdk.Environment:
        return cdk.Environment(account=self.account, region=self.region)


DEPLOYMENT_TARGET = DeploymentTarget(account="826607129737", region="eu-west-3")

STACK_NAME = "CdkDeployStack"
STACK_DESCRIPTION = "Merkle Infos - Lambda (custom runtime) behind API Gateway"

# Prebuilt custom runtime archive, expected at the repository root
DEFAULT_CODE_ASSET = os.path.join(os.path.dirname(__file__), "..", "lambda.zip")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
