# Copyright 2026 UCP Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Proxy Configuration

Settings are resolved once at process start from the environment (and a
local .env file when present) and then shared read-only by the order proxy.

Environment variables:
- CROSSMINT_SERVER_SIDE_API_KEY: Server credential for the Crossmint API
- CROSSMINT_ENV: "staging" (default) or "production"
- CHAIN_ID: Chain of the delivered token (default "solana")
- USDC_TOKEN_MINT: Mint/contract address of the delivered token
- CROSSMINT_HTTP_TIMEOUT_SECONDS: Upstream timeout (default 30)
- ALLOWED_ORIGINS: Comma-separated CORS origins (default "*")
- CHECKOUT_MIN_AMOUNT / CHECKOUT_MAX_AMOUNT: Accepted deposit range

The NEXT_PUBLIC_* names used by the web frontend are accepted as fallbacks.
"""

from decimal import Decimal, InvalidOperation
from typing import List, Mapping, Optional
import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .constants import Constants
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

constants = Constants()


class Settings(BaseModel):
    """Process-wide, immutable proxy configuration."""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = Field(None, repr=False)
    environment: str = "staging"
    chain_id: str = "solana"
    token_mint: str = ""
    http_timeout: float = 30.0
    allowed_origins: List[str] = Field(default_factory=lambda: ["*"])
    min_amount: Decimal = Decimal("1")
    max_amount: Decimal = Decimal("10000")

    @property
    def token_locator(self) -> str:
        """Composite chain + token identity of the delivered asset."""
        return f"{self.chain_id}:{self.token_mint}:{self.token_mint}"

    @property
    def api_base_url(self) -> str:
        return (
            f"https://{self.environment}.{constants.CROSSMINT_DOMAIN}"
            f"/api/{constants.CROSSMINT_API_VERSION}"
        )

    @property
    def orders_url(self) -> str:
        return f"{self.api_base_url}/orders"

    def require_api_key(self) -> str:
        """
        Return the server API key.

        Raises:
            ConfigurationError: If no key is configured
        """
        if not self.api_key:
            raise ConfigurationError(constants.ERROR_MISSING_API_KEY)
        return self.api_key


def _first_env(env: Mapping[str, str], *names: str, default: Optional[str] = None) -> Optional[str]:
    for name in names:
        value = env.get(name)
        if value:
            return value.strip()
    return default


def _decimal_env(env: Mapping[str, str], name: str, default: str) -> Decimal:
    raw = _first_env(env, name, default=default)
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from environment variables.

    Args:
        env: Mapping to read from. Defaults to os.environ after loading .env

    Returns:
        Frozen Settings instance

    Raises:
        ConfigurationError: If a value is present but invalid
    """
    if env is None:
        load_dotenv()
        env = os.environ

    environment = _first_env(env, "CROSSMINT_ENV", default="staging").lower()
    if environment not in constants.CROSSMINT_ENVIRONMENTS:
        raise ConfigurationError(
            f"CROSSMINT_ENV must be one of {', '.join(constants.CROSSMINT_ENVIRONMENTS)}, "
            f"got {environment!r}"
        )

    timeout_raw = _first_env(env, "CROSSMINT_HTTP_TIMEOUT_SECONDS", default="30")
    try:
        http_timeout = float(timeout_raw)
    except ValueError:
        raise ConfigurationError(
            f"CROSSMINT_HTTP_TIMEOUT_SECONDS must be a number, got {timeout_raw!r}"
        )

    origins_raw = _first_env(env, "ALLOWED_ORIGINS", default="*")
    allowed_origins = [o.strip() for o in origins_raw.split(",") if o.strip()] or ["*"]

    settings = Settings(
        api_key=_first_env(
            env,
            "CROSSMINT_SERVER_SIDE_API_KEY",
            "NEXT_PUBLIC_CROSSMINT_SERVER_API_KEY",
        ),
        environment=environment,
        chain_id=_first_env(env, "CHAIN_ID", "NEXT_PUBLIC_CHAIN_ID", default="solana"),
        token_mint=_first_env(env, "USDC_TOKEN_MINT", "NEXT_PUBLIC_USDC_TOKEN_MINT", default=""),
        http_timeout=http_timeout,
        allowed_origins=allowed_origins,
        min_amount=_decimal_env(env, "CHECKOUT_MIN_AMOUNT", "1"),
        max_amount=_decimal_env(env, "CHECKOUT_MAX_AMOUNT", "10000"),
    )

    if not settings.api_key:
        logger.warning("CROSSMINT_SERVER_SIDE_API_KEY is not set, order creation will fail")
    if not settings.token_mint:
        logger.warning("USDC_TOKEN_MINT is not set, token locator will be incomplete")

    logger.info(f"Loaded settings for Crossmint {settings.environment}, chain {settings.chain_id}")
    return settings
