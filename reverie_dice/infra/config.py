"""Application configuration via Pydantic Settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Dice
    default_dice_type: int = 6
    default_dices_count: int = 1
    default_additional_dices_count: int = 0
    default_rerolls_count: int = 0  # -1 for unlimited
    default_bursts_count: int = 0  # -1 for unlimited
    default_bonus: int = 0

    # Random
    random_seed: int | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
