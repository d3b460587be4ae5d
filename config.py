from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "LoanLink API"
    debug: bool = False
    log_level: str = "INFO"
    port: int = 3000

    database_url: str = "sqlite+aiosqlite:///./loanlink.db"
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
