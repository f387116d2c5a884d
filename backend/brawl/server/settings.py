"""Host configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class BrawlSettings(BaseSettings):
    model_config = {"env_prefix": "BRAWL_"}

    history_file: str = Field(default="backend/data/brawl_history.json", min_length=1)
    log_dir: str = Field(default="backend/logs/brawl", min_length=1)

    # Display name substituted for the "You" alias in roll lines.
    # Empty means the alias cannot be resolved and such rolls are dropped.
    observer_name: str = ""

    def observer(self) -> str | None:
        return self.observer_name.strip() or None
