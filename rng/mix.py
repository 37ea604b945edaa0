from blake3 import blake3
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.primitives import hashes
from Crypto.Cipher import ChaCha20

SEED_SALT = blake3(b"UR|seed").digest()

def hkdf_key(seed: bytes, label: str) -> bytes:
    """
    32-байтный ключ ChaCha20 из seed любой длины.
    label даёт доменную сепарацию: разные метки -> независимые потоки
    """
    hkdf = HKDF(
        algorithm=hashes.SHA256(),
        length=32,
        salt=SEED_SALT,
        info=b"UR|" + label.encode("utf-8"),
    )
    return hkdf.derive(seed)

def chacha20_keystream(key: bytes):
    # нулевой nonce: ключ и так уникален для пары (seed, label)
    return ChaCha20.new(key=key, nonce=b"\x00"*8)
