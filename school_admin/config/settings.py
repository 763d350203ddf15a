import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load the appropriate environment file
env_file = '.env.local'
load_dotenv(env_file)

DEFAULT_BACKEND_URL = 'https://myschool-official-server-6t886153c.vercel.app'


class Settings(BaseSettings):
    """Admin front-end settings."""
    # App settings
    APP_ENV: str = os.getenv('APP_ENV', 'production')
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    # Backend the screens talk to
    BACKEND_URL: str = os.getenv('BACKEND_URL', DEFAULT_BACKEND_URL)
    DASHBOARD_API_PREFIX: str = os.getenv('DASHBOARD_API_PREFIX', '/api')

    # Request timeouts (seconds). 0 disables the timeout entirely.
    REQUEST_TIMEOUT_SECONDS: float = float(os.getenv('REQUEST_TIMEOUT_SECONDS', 30))
    CONNECT_TIMEOUT_SECONDS: float = float(os.getenv('CONNECT_TIMEOUT_SECONDS', 10))

    # Dashboards fall back to demonstration data when the backend has none
    USE_SAMPLE_DATA_FALLBACK: bool = os.getenv('USE_SAMPLE_DATA_FALLBACK', 'true').lower() == 'true'

    # Display
    CURRENCY_SYMBOL: str = os.getenv('CURRENCY_SYMBOL', '৳')

    # Local mock backend
    MOCK_BACKEND_HOST: str = os.getenv('MOCK_BACKEND_HOST', '127.0.0.1')
    MOCK_BACKEND_PORT: int = int(os.getenv('MOCK_BACKEND_PORT', 8000))

    class Config:
        env_file = env_file
        extra = 'ignore'


settings = Settings()


def get_settings() -> Settings:
    return settings
