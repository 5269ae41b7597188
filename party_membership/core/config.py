from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./party_membership.db"

    MEMBER_NUMBER_PREFIX: str = "NVP-"
    MEMBER_NUMBER_WIDTH: int = 6
    MEMBER_COUNTER_NAME: str = "party_member_counter"

    ADMIN_PAGE_SIZE: int = 20
    ADMIN_KEY_HASH: str = ""
    NONCE_TTL_SECONDS: int = 3600

    # whoever knows a registered ID number sees the member's email and phone
    LOOKUP_EXPOSE_CONTACT: bool = True

    TIMEZONE: str = "UTC"
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

settings = Settings()
