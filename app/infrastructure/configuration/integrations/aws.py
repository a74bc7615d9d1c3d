"""AWS settings used by the DynamoDB translation store."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS connection settings.

    Environment Variables:
        AWS_REGION: Region of the translations table (default: ca-central-1)
        DYNAMODB_ENDPOINT_URL: Endpoint override for LocalStack or
            dynamodb-local; unset to use the regional AWS endpoint
    """

    AWS_REGION: str = Field(default="ca-central-1", alias="AWS_REGION")
    DYNAMODB_ENDPOINT_URL: Optional[str] = Field(
        default=None, alias="DYNAMODB_ENDPOINT_URL"
    )
