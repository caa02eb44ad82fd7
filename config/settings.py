from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Upstream data providers (free, no keys)
    rugcheck_base_url: str = "https://api.rugcheck.xyz/v1"
    dexscreener_base_url: str = "https://api.dexscreener.com"
    dexscreener_chain: str = "solana"
    provider_timeout_sec: float = 10.0

    # LLM narrative via OpenRouter
    openrouter_api_key: str = ""
    llm_base_url: str = "https://openrouter.ai/api/v1"
    llm_model: str = "anthropic/claude-sonnet-4"
    llm_temperature: float = 0.9
    llm_max_tokens: int = 1024
    llm_timeout_sec: float = 60.0  # LLM responses can be slow

    # HTTP API
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_cors_origins: str = "http://localhost:3000"  # comma-separated
    analyze_rate_limit: str = "20/minute"
    api_debug: bool = False

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False
    log_dir: str = "logs"  # empty disables the file sink


settings = Settings()
