"""
HashiCorp Vault client for diary secret management.

Uses AppRole authentication. Fails fast on missing configuration.
All paths scoped to 'diary/' prefix - no escape to other secrets.
"""

import os
import logging
from typing import Dict

import hvac
from hvac.exceptions import InvalidPath, Unauthorized, Forbidden

logger = logging.getLogger(__name__)

# Project scope - all secrets under this path
_SECRET_PREFIX = "diary"

# Singleton instance and cache
_vault_client_instance: "VaultClient | None" = None
_secret_cache: Dict[str, str] = {}


def _ensure_vault_client() -> "VaultClient":
    global _vault_client_instance
    if _vault_client_instance is None:
        _vault_client_instance = VaultClient()
    return _vault_client_instance


class VaultError(Exception):
    """Vault operation failed. Fatal - the database URL cannot be resolved."""


class VaultClient:
    """Vault client with AppRole auth and env-based config."""

    def __init__(self, vault_addr: str | None = None):
        """
        Read VAULT_ADDR, VAULT_ROLE_ID and VAULT_SECRET_ID, then log in.

        Raises:
            VaultError: Missing configuration or failed authentication
        """
        self.vault_addr = vault_addr or os.getenv("VAULT_ADDR")
        role_id = os.getenv("VAULT_ROLE_ID")
        secret_id = os.getenv("VAULT_SECRET_ID")

        if not self.vault_addr:
            raise VaultError("VAULT_ADDR environment variable is required")
        if not role_id or not secret_id:
            raise VaultError(
                "VAULT_ROLE_ID and VAULT_SECRET_ID environment variables are required"
            )

        self.client = hvac.Client(url=self.vault_addr)

        try:
            auth_response = self.client.auth.approle.login(role_id=role_id, secret_id=secret_id)
        except (hvac.exceptions.VaultError, OSError) as e:
            logger.error(f"AppRole authentication failed: {e}")
            raise VaultError(f"AppRole authentication failed: {e}") from e

        self.client.token = auth_response["auth"]["client_token"]
        logger.info(f"Vault client initialized: {self.vault_addr}")

    def get_secret(self, path: str, field: str) -> str:
        """
        Retrieve single field from KV v2 secret under 'diary/'.

        Raises:
            VaultError: Path not accessible, missing, or field absent
        """
        full_path = f"{_SECRET_PREFIX}/{path}"

        try:
            response = self.client.secrets.kv.v2.read_secret_version(
                path=full_path, raise_on_deleted_version=True
            )
        except InvalidPath as e:
            logger.error(f"Secret path not found: {full_path}")
            raise VaultError(f"Secret path '{full_path}' not found in Vault") from e
        except (Unauthorized, Forbidden) as e:
            logger.error(f"Access denied to secret {full_path}: {e}")
            raise VaultError(f"Access denied to secret '{full_path}'") from e

        secret_data = response["data"]["data"]
        if field not in secret_data:
            raise VaultError(f"Field '{field}' not found in secret '{full_path}'")

        return secret_data[field]


def get_database_url() -> str:
    """Get PostgreSQL connection URL from Vault (cached)."""
    cache_key = f"{_SECRET_PREFIX}/database/url"

    if cache_key not in _secret_cache:
        _secret_cache[cache_key] = _ensure_vault_client().get_secret("database", "url")

    return _secret_cache[cache_key]
