from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # DATABASE_URL wins over the DB_* parts when set
    DATABASE_URL: str | None = None
    DB_USER: str = "root"
    DB_PASSWORD: str = "password"
    DB_HOST: str = "127.0.0.1"
    DB_PORT: str = "3306"
    DB_NAME: str = "hasznalt"
    DB_POOL_SIZE: int = 5
    DB_POOL_TIMEOUT: int = 30

    SECRET_KEY: str = "change-me"
    SESSION_COOKIE_NAME: str = "session_id"
    SESSION_COOKIE_SECURE: bool = False
    SESSION_COOKIE_MAX_AGE: int | None = None
    SESSION_FINGERPRINT_HEADERS: list[str] = ["user-agent", "accept-language"]

    FRONTEND_DIST_DIR: str = "frontend/dist"
    LOG_LEVEL: str = "INFO"

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
