from pydantic import BaseModel, Field
from typing import Literal


class ClientSettings(BaseModel):
    api_url: str = "https://api.braintrust.dev"
    api_key_env: str = "BRAINTRUST_API_KEY"
    org_name: str | None = None
    # fallback for organization resources that do not set org_id
    org_id: str | None = None
    timeout: int = Field(default=60, gt=0)


class LookupSettings(BaseModel):
    # two results are enough to tell "unique" from "ambiguous"
    name_lookup_limit: int = Field(default=2, ge=2)


class ReconcileConfig(BaseModel):
    client: ClientSettings = Field(default_factory=ClientSettings)
    lookup: LookupSettings = Field(default_factory=LookupSettings)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
