"""
Merkle Infos CDK Stack

Deploys the Merkle infos endpoint:
- Lambda function running the prebuilt custom runtime archive
- API Gateway REST API exposing GET /merkleinfos
"""

import logging
from typing import Optional

from constructs import Construct
import aws_cdk as cdk
from aws_cdk import (
    aws_lambda as _lambda,
    aws_apigateway as apigw,
)

from merkle_infos import config

logger = logging.getLogger(__name__)
logger.setLevel(config.LOG_LEVEL)


class MerkleInfosStack(cdk.Stack):

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        code_asset_path: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        code_asset_path = code_asset_path or config.DEFAULT_CODE_ASSET

        # ====================================================================
        # LAMBDA: merkle infos handler
        # ====================================================================
        logger.info(f"Binding Lambda code asset: {code_asset_path}")
        self.handler_fn = _lambda.Function(
            self,
            "MerkleInfosHandler",
            runtime=_lambda.Runtime.PROVIDED,
            code=_lambda.Code.from_asset(code_asset_path),
            handler="hello",  # unused by the custom runtime bootstrap
        )

        # ====================================================================
        # API GATEWAY
        # ====================================================================
        self.api = apigw.RestApi(
            self,
            "MerkleInfosApi",
            rest_api_name="MerkleInfosService",
        )

        # GET /merkleinfos
        self.merkle_infos_resource = self.api.root.add_resource("merkleinfos")
        self.merkle_infos_resource.add_method(
            "GET",
            apigw.LambdaIntegration(self.handler_fn),
        )

        # ====================================================================
        # OUTPUTS
        # ====================================================================
        cdk.CfnOutput(
            self,
            "ApiUrl",
            value=self.api.url,
            description="API Gateway URL",
        )

        cdk.CfnOutput(
            self,
            "MerkleInfosEndpoint",
            value=self.api.url_for_path("/merkleinfos"),
            description="GET endpoint for Merkle infos",
        )
