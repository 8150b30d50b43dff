from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parent.parent.parent / ".env"

# CLI 실행 시 작업 디렉토리의 .env도 환경변수로 로드
load_dotenv(dotenv_path=".env")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 앱 관련 설정
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000
    APP_NAME: str = "figma2html"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # 로깅 관련 설정
    DATA_PATH: str = "./data"
    LOG_PATH: str = "/logs"
    ENVIRONMENT: str = "LOCAL"
    LOG_LEVEL: str = "INFO"
    OTLP_ENDPOINT: str = "localhost:4317"

    # Figma API 관련 설정
    FIGMA_API_BASE_URL: str = "https://api.figma.com/v1"
    FIGMA_API_TOKEN: str | None = None
    FIGMA_API_TIMEOUT: int = 30
    FIGMA_MAX_RETRIES: int = 3
    FIGMA_RETRY_BASE_DELAY: float = 1.0

    # 변환 관련 설정
    ARTBOARD_GAP: int = 32


settings = Settings()


def get_setting() -> Settings:
    return settings
