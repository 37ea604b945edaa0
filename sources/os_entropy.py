# sources/os_entropy.py
from typing import Optional
from settings import settings
from errors import EntropyError, ValidationError

def device_path(strong: Optional[bool] = None) -> str:
    if strong is None:
        strong = settings.USE_STRONG_ENTROPY
    return settings.RANDOM_DEVICE if strong else settings.URANDOM_DEVICE

def read_seed_bytes(strong: Optional[bool] = None, nbytes: Optional[int] = None) -> bytes:
    """
    Читаем ровно nbytes из устройства. Короткое чтение дочитываем,
    EOF раньше времени или ошибка открытия -> EntropyError (фатально, без ретраев).
    """
    path = device_path(strong)
    need = settings.SEED_BYTES if nbytes is None else int(nbytes)
    if need <= 0:
        raise EntropyError(f"{path}: seed size must be positive, got {need}")
    out = bytearray()
    try:
        with open(path, "rb", buffering=0) as f:
            while len(out) < need:
                chunk = f.read(need - len(out))
                if not chunk:
                    raise EntropyError(f"{path}: short read ({len(out)} of {need} bytes)")
                out.extend(chunk)
    except OSError as e:
        raise EntropyError(f"{path}: {e.strerror or e}") from e
    return bytes(out)

def read_seed(strong: Optional[bool] = None, nbytes: Optional[int] = None) -> int:
    """Seed = байты устройства как big-endian беззнаковое целое."""
    return int.from_bytes(read_seed_bytes(strong, nbytes), "big")

def seed_to_bytes(seed: int) -> bytes:
    if seed < 0:
        raise ValueError("seed must be non-negative")
    return seed.to_bytes(max(1, (seed.bit_length() + 7) // 8), "big")

def seed_to_hex(seed: int) -> str:
    return seed_to_bytes(seed).hex()

def seed_from_hex(seed_hex: str) -> int:
    try:
        data = bytes.fromhex(seed_hex)
    except ValueError:
        raise ValidationError("seed_hex must be hex")
    if not data:
        raise ValidationError("seed_hex must not be empty")
    return int.from_bytes(data, "big")
