from os import environ

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    project_name: str
    aws_region: str
    dynamodb_endpoint: str | None = None
    bookings_table: str
    dynamodb_connect_timeout: float
    dynamodb_read_timeout: float
    dynamodb_max_attempts: int
    log_level: str = "INFO"
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        project_name=environ.get("PROJECT_NAME", "Synergia Event Booking API"),
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        bookings_table=environ.get("BOOKINGS_TABLE", "Bookings"),
        dynamodb_connect_timeout=float(environ.get("DYNAMODB_CONNECT_TIMEOUT", "2")),
        dynamodb_read_timeout=float(environ.get("DYNAMODB_READ_TIMEOUT", "5")),
        dynamodb_max_attempts=int(environ.get("DYNAMODB_MAX_ATTEMPTS", "3")),
        log_level=environ.get("LOG_LEVEL", "INFO"),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
