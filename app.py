# =============================================================================
# app.py (root directory) - CDK App Entry Point
# =============================================================================

#!/usr/bin/env python3
import logging

import aws_cdk as cdk
from merkle_infos import config
from merkle_infos.merkle_infos_stack import MerkleInfosStack

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger()

app = cdk.App()

MerkleInfosStack(
    app,
    config.STACK_NAME,
    env=config.DEPLOYMENT_TARGET.to_environment(),
    description=config.STACK_DESCRIPTION,
)

logger.info(
    f"Synthesizing {config.STACK_NAME} for "
    f"{config.DEPLOYMENT_TARGET.account}/{config.DEPLOYMENT_TARGET.region}"
)
app.synth()
