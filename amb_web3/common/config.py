"""
common/config.py

Environment-driven defaults for building a provider.
"""

import os
from typing import Any, Dict

from .networks import DEFAULT_NETWORK


def get_default_network() -> str:
    return os.environ.get("AMB_NETWORK", DEFAULT_NETWORK)


def get_env_provider_kwargs() -> Dict[str, Any]:
    """
    Read provider construction arguments from the environment.

    AMB_NODE_ID, AMB_NODE_REGION, AMB_BILLING_TOKEN and AMB_NETWORK map to
    the matching constructor arguments. AWS credentials are left to
    botocore's own configuration.
    """
    return {
        "node_id": os.environ.get("AMB_NODE_ID"),
        "node_region": os.environ.get("AMB_NODE_REGION"),
        "billing_token": os.environ.get("AMB_BILLING_TOKEN"),
        "network": get_default_network(),
    }
