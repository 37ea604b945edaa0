import pytest
from settings import settings


@pytest.fixture
def fake_devices(tmp_path, monkeypatch):
    """Подменяем /dev/random и /dev/urandom обычными файлами с известным содержимым."""
    strong = tmp_path / "random"
    weak = tmp_path / "urandom"
    strong.write_bytes(bytes([0xAA]) * settings.SEED_BYTES)
    weak.write_bytes(bytes(range(256)) * (settings.SEED_BYTES // 256 + 1))
    monkeypatch.setattr(settings, "RANDOM_DEVICE", str(strong))
    monkeypatch.setattr(settings, "URANDOM_DEVICE", str(weak))
    return strong, weak
