from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_CONFIG = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


class AppSettings(BaseSettings):
    """General application settings."""

    model_config = _ENV_CONFIG

    name: str = Field("Ledger Graph Read Model", validation_alias="APP_NAME")
    debug: bool = Field(False, validation_alias="DEBUG")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")


class NetworkSettings(BaseSettings):
    """Which Cardano network the graph store was loaded from."""

    model_config = _ENV_CONFIG

    network: Literal["mainnet", "testnet", "preview"] = Field(
        default="mainnet",
        validation_alias="NETWORK",
        description="Selects era timestamps and the reward address network id",
    )


class GraphStoreSettings(BaseSettings):
    """Settings for the Neo4j graph store connection."""

    model_config = _ENV_CONFIG

    uri: str = Field(default="bolt://localhost:7687", validation_alias="NEO4J_URI")
    user: str = Field(default="neo4j", validation_alias="NEO4J_USER")
    password: str = Field(default="neo4j", validation_alias="NEO4J_PASSWORD")
    database: Optional[str] = Field(
        default=None,
        validation_alias="NEO4J_DATABASE",
        description="Target database name, None uses the server default",
    )


class PaginationSettings(BaseSettings):
    """Limits applied while resolving pagination cursors."""

    model_config = _ENV_CONFIG

    # Upper bound on how many :next hops the boundary search may walk back
    max_traversal_depth: int = Field(default=10000, gt=0, validation_alias="PAGINATION_MAX_TRAVERSAL_DEPTH")


class Settings(BaseSettings):
    """
    Main Settings class that composes all sub-settings.
    Each sub-settings class reads its own flat env vars.
    """

    app: AppSettings = Field(default_factory=AppSettings)
    network: NetworkSettings = Field(default_factory=NetworkSettings)
    graph_store: GraphStoreSettings = Field(default_factory=GraphStoreSettings)
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)

    model_config = _ENV_CONFIG


# Singleton instance
settings = Settings()
