from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "court-share-calculator"
    LOG_LEVEL: str = "INFO"

    # Currency display — amounts are always whole units
    CURRENCY_CODE: str = "INR"
    CURRENCY_SYMBOL: str = "₹"
    DIGIT_GROUPING: str = "indian"  # "indian" (1,00,000) or "western" (100,000)

    # Fresh calculation starts with this many empty player rows
    DEFAULT_PARTICIPANT_SLOTS: int = 5

    # Shareable summary text
    SUMMARY_TITLE: str = "Badminton Session Summary"
    COST_A_LABEL: str = "Court"
    COST_B_LABEL: str = "Shuttle"
    SUMMARY_FOOTER: str = "Calculated via Badminton Share Tool"
    SHARE_BASE_URL: str = "https://wa.me/"

    class Config:
        env_file = ".env"


settings = Settings()
