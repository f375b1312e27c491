"""Runtime configuration for MC Planner."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="MC_PLANNER_", env_file=".env", extra="ignore")

    app_name: str = "mc-planner"
    log_level: str = "INFO"
    max_depth: int = Field(default=10, ge=1, description="Recursion bound for dependency resolution.")
    native_namespace: str = Field(
        default="minecraft",
        description="Rule/resource namespace treated as authoritative.",
    )
    untrusted_namespaces: list[str] = Field(
        default_factory=lambda: [
            "mystical",
            "apotheosis",
            "productive",
            "mob",
            "essence",
            "occultism",
            "ars_",
            "botania",
            "bloodmagic",
            "forbidden",
            "pneumaticcraft",
            "integrated",
        ],
        description="Namespace prefixes whose conversion rules rank last.",
    )
    long_task_threshold: int = Field(default=20, ge=1, description="Async step quantity flagged as slow.")
    telemetry_enabled: bool = True
    rules_path: str | None = None
    inventory_path: str | None = None


settings = Settings()
