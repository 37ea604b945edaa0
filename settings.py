from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Источники энтропии: "сильный" (блокирующий) и быстрый
    RANDOM_DEVICE: str = "/dev/random"
    URANDOM_DEVICE: str = "/dev/urandom"
    # Сколько байт читаем для seed
    SEED_BYTES: int = 256
    USE_STRONG_ENTROPY: bool = False

    # значения по умолчанию для CLI и API
    DEFAULT_LOW: int = 1
    DEFAULT_HIGH: int = 100
    DEFAULT_COUNT: int = 1

    MAX_API_COUNT: int = 100_000          # лимит для JSON-ответа (/unique/stream без лимита)

settings = Settings()
