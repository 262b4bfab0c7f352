import os



def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "4149"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CORS_ALLOW_ORIGINS = _get_list(os.getenv("CORS_ALLOW_ORIGINS"), default=["*"])

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

# 500 responses carry the raw exception text unless this is off.
EXPOSE_ERROR_DETAILS = _get_bool(
    os.getenv("EXPOSE_ERROR_DETAILS"),
    default=APP_ENV.lower() != "production",
)

def validate_runtime_config() -> None:
    if not 4 <= BCRYPT_ROUNDS <= 31:
        raise RuntimeError("BCRYPT_ROUNDS must be between 4 and 31.")
