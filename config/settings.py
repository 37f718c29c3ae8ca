from datetime import timedelta
from fractions import Fraction

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Source file: headerless CSV of time,companyName,orderType,quantity
    TRADES_CSV_PATH: str = "data/trades.csv"

    # Detection window and threshold (cancel / new must stay <= 1/3)
    WINDOW_SECONDS: int = 60
    MAX_CANCEL_RATIO_NUMERATOR: int = 1
    MAX_CANCEL_RATIO_DENOMINATOR: int = 3

    # App
    APP_NAME: str = "Excessive Cancellations Surveillance"
    DEBUG: bool = False

    @property
    def window(self) -> timedelta:
        return timedelta(seconds=self.WINDOW_SECONDS)

    @property
    def max_cancel_ratio(self) -> Fraction:
        return Fraction(self.MAX_CANCEL_RATIO_NUMERATOR, self.MAX_CANCEL_RATIO_DENOMINATOR)


settings = Settings()
