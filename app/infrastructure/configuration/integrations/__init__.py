"""Settings for external integrations."""

from infrastructure.configuration.integrations.aws import AwsSettings

__all__ = ["AwsSettings"]
