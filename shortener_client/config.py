from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = True
    
    # Application
    app_name: str = "URL Shortener Client"
    app_version: str = "1.0.0"
    
    # Server (where this client app is served)
    host: str = "127.0.0.1"
    port: int = 8000
    
    # Shortening service
    api_base_url: str = ""  # Empty string = same origin as the UI
    ui_origin: str = "http://127.0.0.1:8000"  # Resolves the same-origin case
    request_timeout: float = 10.0  # Seconds
    
    # Submission defaults
    default_validity_minutes: int = 30
    
    # History settings
    history_capacity: int = 20
    history_storage_key: str = "url_history"
    
    # Storage settings (persistence medium for the history blob)
    storage_backend: str = "file"  # Options: "file", "memory", "redis", "sql", "null"
    storage_file_path: str = "url_history.json"
    redis_url: str = "redis://localhost:6379/0"
    database_url: str = "sqlite:///./shortener_client.db"
    
    # Side actions
    clipboard_backend: str = "system"  # Options: "system", "memory"
    
    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
