"""Azure provider configuration schema."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from voiceservices.providers.azure.domain.remote_model import API_VERSION


class AzureProviderConfig(BaseModel):
    """Connection settings for Azure Resource Manager."""
    model_config = ConfigDict(extra="forbid")

    subscription_id: str = Field("", description="Subscription that owns managed gateways")
    tenant_id: Optional[str] = Field(None, description="Tenant used for credential lookup")
    endpoint: str = Field("https://management.azure.com", description="Resource Manager endpoint")
    api_version: str = Field(API_VERSION, description="Communications Gateways API version")

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        if not v.startswith("https://"):
            raise ValueError("Resource Manager endpoint must use https")
        return v.rstrip("/")
