"""
Infrastructure adapter: AWS Secrets Manager → ISecretStore.

Used by load_settings() at process startup when APP_SECRET_ARN is set, so the
provider key and LANGFUSE_* values can live in one JSON secret.
"""

import json
import os

import boto3

from src.domain.ports.secret_store_port import ISecretStore


class SecretsManagerAdapter(ISecretStore):
    """Fetches and deserializes secrets from AWS Secrets Manager."""

    def __init__(self, region: str | None = None) -> None:
        self._client = boto3.client(
            "secretsmanager",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def get_secret(self, secret_id: str) -> dict:
        """Fetch and deserialize a JSON secret by ARN or name."""
        response = self._client.get_secret_value(SecretId=secret_id)
        return json.loads(response["SecretString"])
