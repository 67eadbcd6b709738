"""Client configuration via Pydantic Settings."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment settings used to build a Config and tune HTTP behaviour."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Shop channel credentials
    SHOP_DOMAIN: str = ""
    SHOP_API_KEY: str = ""
    SHOP_CHANNEL_ID: str = ""

    # HTTP transport
    HTTP_TIMEOUT: float = 30.0
    HTTP_MAX_RETRIES: int = 3
    RATE_LIMIT_RPM: int = 60

    # App
    DEBUG: bool = False


settings = Settings()


class Config(BaseModel):
    """Connection parameters for a shop channel.

    Immutable once built. The client shares this exact instance with every
    adapter and serializer it constructs.

    Accepts both snake_case names and the camelCase option names used by the
    JavaScript buy button (``myShopifyDomain``, ``apiKey``, ``channelId``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    domain: str = Field(alias="myShopifyDomain")
    api_key: Union[str, int] = Field(alias="apiKey")
    channel_id: str = Field(alias="channelId")

    @field_validator("domain", "channel_id")
    @classmethod
    def require_non_empty(cls, value: str, info: ValidationInfo) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"Config requires the option '{info.field_name}'")
        return value

    @field_validator("api_key")
    @classmethod
    def require_api_key(cls, value: Union[str, int]) -> Union[str, int]:
        if isinstance(value, str) and not value.strip():
            raise ValueError("Config requires the option 'api_key'")
        return value

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "Config":
        """Build a Config from environment settings.

        Args:
            source: Settings to read from (defaults to the module settings)

        Returns:
            Config instance
        """
        source = source or settings
        return cls(
            domain=source.SHOP_DOMAIN,
            api_key=source.SHOP_API_KEY,
            channel_id=source.SHOP_CHANNEL_ID,
        )
