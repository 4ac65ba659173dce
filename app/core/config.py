"""Application configuration settings"""


from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Database
    database_url: str = Field(default="sqlite:///./users.db")
    database_timeout_seconds: float = Field(default=30.0)  # wait for SQLite write lock

    # Security
    password_hash_scheme: str = Field(default="bcrypt")

    # Application
    app_name: str = Field(default="User Registration API")
    debug: bool = Field(default=False)
    version: str = Field(default="0.1.0")
    log_level: str = Field(default="INFO")

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
