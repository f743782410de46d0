from typing import Dict, Optional

from pydantic import Field, field_validator

from core.settings.base import RelayBaseSettings


REGION_HOSTS: Dict[str, str] = {
    "NA": "sellingpartnerapi-na.amazon.com",
    "EU": "sellingpartnerapi-eu.amazon.com",
    "FE": "sellingpartnerapi-fe.amazon.com",
}

JP_MARKETPLACE_ID = "A1VC38T7YXB528"


class AmazonSettings(RelayBaseSettings):
    """
    LWA credentials and SP-API options.
    Loaded from the environment with exact variable name matching.
    """

    # LWA credentials
    lwa_client_id: str = Field(..., alias="LWA_CLIENT_ID")
    lwa_client_secret: str = Field(..., alias="LWA_CLIENT_SECRET")
    refresh_token: str = Field(..., alias="REFRESH_TOKEN")
    lwa_token_url: str = Field(
        default="https://api.amazon.com/auth/o2/token", alias="LWA_TOKEN_URL"
    )

    # SP-API
    marketplace_id: str = Field(default=JP_MARKETPLACE_ID, alias="SPAPI_MARKETPLACE_ID")
    region: str = Field(default="FE", alias="SPAPI_REGION")
    carrier_code: str = Field(default="SAGAWA", alias="SPAPI_CARRIER_CODE")
    concurrent_item_lookups: bool = Field(
        default=False, alias="SPAPI_CONCURRENT_ITEM_LOOKUPS"
    )
    http_timeout_seconds: Optional[float] = Field(
        default=None, alias="SPAPI_HTTP_TIMEOUT_SECONDS"
    )

    @field_validator("region")
    @classmethod
    def _known_region(cls, value: str) -> str:
        region = value.strip().upper()
        if region not in REGION_HOSTS:
            raise ValueError(
                f"SPAPI_REGION must be one of {sorted(REGION_HOSTS)}, got {value!r}"
            )
        return region

    @property
    def endpoint(self) -> str:
        """Base URL of the regional SP-API host."""
        return f"https://{REGION_HOSTS[self.region]}"
