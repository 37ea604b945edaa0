from pydantic import BaseModel, Field
from typing import Literal, Optional
from settings import settings

class UniqueDrawIn(BaseModel):
    low: int = settings.DEFAULT_LOW
    high: int = settings.DEFAULT_HIGH
    count: int = Field(settings.DEFAULT_COUNT, description="Сколько уникальных чисел")

    # источник seed: устройство (strong -> /dev/random) или явный hex для воспроизводимости
    strong: bool = settings.USE_STRONG_ENTROPY
    seed_hex: Optional[str] = Field(None, description="seed в hex; если задан, устройство не читаем")

class UniqueDrawOut(BaseModel):
    low: str
    high: str
    count: int
    strategy: Literal["direct", "complement"]
    seed_hex: str
    values: list[str]      # строки: большие целые без потери точности в JS

class RangeBySeedIn(BaseModel):
    seed_hex: str = Field(..., description="seed (hex)")
    n1: int
    n2: int
    label: str = "RANGE/v1"
