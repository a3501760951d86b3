"""Configuration for the external APIs used during enrichment."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "PROPOSAL_ENRICHER_"

# field name -> environment variable suffix
_ENV_KEYS = {
    "opportunity_api_base": "OPPORTUNITY_API_BASE",
    "search_api_base": "SEARCH_API_BASE",
    "search_api_key": "SEARCH_API_KEY",
    "search_index": "SEARCH_INDEX",
    "request_timeout": "REQUEST_TIMEOUT",
}


class EnrichmentConfig(BaseModel):
    """Base URLs and credentials for the opportunity and search APIs."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    opportunity_api_base: str = Field(
        default="http://localhost:8001/api/salesforce",
        alias="opportunityApiBase",
        description="Salesforce-dummy API root; /opportunity/{number} is appended",
    )
    search_api_base: str = Field(
        default="http://localhost:7700",
        alias="searchApiBase",
        description="Meilisearch root; /indexes/{index}/search is appended",
    )
    search_api_key: str = Field(default="masterKey", alias="searchApiKey")
    search_index: str = Field(default="employees", alias="searchIndex")
    request_timeout: Optional[float] = Field(
        default=None,
        alias="requestTimeout",
        description="Seconds; None disables the timeout",
    )

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "EnrichmentConfig":
        """Build config from PROPOSAL_ENRICHER_* environment variables. Unset keys keep defaults."""
        return cls.model_validate(_values_from_env(environ))

    @classmethod
    def from_yaml(cls, path: str | Path, environ: Optional[dict[str, str]] = None) -> "EnrichmentConfig":
        """
        Load config from YAML. Supports flat keys or keys nested under 'enrichment'.
        Both snake_case and camelCase keys are accepted. Environment values fill
        anything the file leaves out.
        """
        data = yaml.safe_load(Path(path).read_text()) or {}
        section = (data.get("enrichment") or {}) if "enrichment" in data else data
        merged = _values_from_env(environ)
        for name, field in cls.model_fields.items():
            if name in section:
                merged[name] = section[name]
            elif field.alias and field.alias in section:
                merged[name] = section[field.alias]
        return cls.model_validate(merged)


def _values_from_env(environ: Optional[dict[str, str]] = None) -> dict:
    env = os.environ if environ is None else environ
    values: dict = {}
    for name, suffix in _ENV_KEYS.items():
        raw = env.get(ENV_PREFIX + suffix)
        if raw is not None and raw.strip():
            values[name] = raw.strip()
    return values
