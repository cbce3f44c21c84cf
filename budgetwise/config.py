from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Exchange rates
    exchange_rate_base_url: str = "https://open.er-api.com/v6/latest"
    exchange_rate_timeout: float = 10.0
    exchange_rate_cache_ttl: int = 60 * 60  # 1 hour

    # City search
    city_search_cache_ttl: int = 60 * 60  # 1 hour
    city_search_min_query_length: int = 2

    # Recommendations
    default_trip_days: int = 7
    recommendation_limit: int = 5
    recommendation_lead_days: int = 30
    default_flight_budget_share: float = 0.4
    # Single affordability policy for every recommendation path (1.0 = strict)
    affordability_tolerance: float = 1.0

    # Mock data
    mock_seed: int | None = None
    default_currency: str = "USD"

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
