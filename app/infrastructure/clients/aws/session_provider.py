"""Session provider for AWS client operations.

Centralizes region, endpoint and role configuration so per-service clients
only build call kwargs instead of managing sessions themselves.
"""

from typing import Any, Dict, Optional

from infrastructure.clients.aws.executor import get_boto3_client
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class SessionProvider:
    """Provider for AWS session configuration and credential handling.

    Args:
        region: AWS region for all clients (e.g., 'ca-central-1')
        service_role_map: Optional mapping of service name to role ARN
        endpoint_url: Custom endpoint URL (LocalStack, DynamoDB Local)
    """

    def __init__(
        self,
        region: Optional[str] = None,
        service_role_map: Optional[dict[str, str]] = None,
        endpoint_url: Optional[str] = None,
    ) -> None:
        self.region = region
        self.service_role_map = service_role_map or {}
        self.endpoint_url = endpoint_url

    def build_client_kwargs(
        self,
        service_name: Optional[str] = None,
        role_arn: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Build session and client kwargs for `execute_aws_api_call`.

        The role is taken from ``service_role_map`` when ``role_arn`` is not
        given explicitly.

        Args:
            service_name: AWS service name used for role lookup
            role_arn: Explicit role ARN to assume

        Returns:
            Dict with session_config, client_config and role_arn
        """
        if role_arn is None and service_name:
            role_arn = self.service_role_map.get(service_name)

        session_config: Dict[str, Any] = {}
        client_config: Dict[str, Any] = {}

        if self.region:
            session_config["region_name"] = self.region
            client_config["region_name"] = self.region

        if self.endpoint_url:
            client_config["endpoint_url"] = self.endpoint_url

        logger.debug(
            "built_client_kwargs",
            service_name=service_name,
            region=self.region,
            endpoint_url=self.endpoint_url,
            role_arn=role_arn,
        )
        return {
            "session_config": session_config or None,
            "client_config": client_config or None,
            "role_arn": role_arn,
        }

    def get_boto3_client(self, service_name: str) -> Any:
        """Get a fully-configured boto3 client for the given service."""
        kw = self.build_client_kwargs(service_name=service_name)
        return get_boto3_client(
            service_name,
            session_config=kw["session_config"],
            client_config=kw["client_config"],
            role_arn=kw["role_arn"],
        )
