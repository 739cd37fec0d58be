"""AWS integration settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS configuration settings.

    Environment Variables:
        AWS_REGION: AWS region for services (default: ca-central-1)
        AWS_ENDPOINT_URL: Optional custom endpoint (LocalStack, DynamoDB Local)
        AWS_OVERRIDES_ROLE_ARN: Optional role assumed for the override table

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        region = settings.aws.AWS_REGION
        ```
    """

    AWS_REGION: str = Field(default="ca-central-1", alias="AWS_REGION")
    ENDPOINT_URL: Optional[str] = Field(default=None, alias="AWS_ENDPOINT_URL")
    OVERRIDES_ROLE_ARN: str = Field(default="", alias="AWS_OVERRIDES_ROLE_ARN")

    @property
    def SERVICE_ROLE_MAP(self) -> dict[str, str]:
        """Mapping of service names to their associated role ARNs.

        Returns:
            Dict mapping service identifiers to role ARNs (empty entries omitted)
        """
        role_map = {"dynamodb": self.OVERRIDES_ROLE_ARN}
        return {service: arn for service, arn in role_map.items() if arn}
