# rng/state.py
from __future__ import annotations
from typing import Optional
from rng.mix import hkdf_key, chacha20_keystream
from sources.os_entropy import read_seed, seed_to_bytes

DEFAULT_LABEL = "UNIQUE/v1"

class GeneratorState:
    """
    Детерминированный PRNG: ChaCha20-поток, ключ из HKDF(seed).
    Один seed + одна метка -> одна и та же последовательность.
    Живёт один прогон (процесс CLI или один HTTP-запрос), потоками не делится.
    """

    def __init__(self, seed: int, label: str = DEFAULT_LABEL):
        self.seed = int(seed)
        self.label = label
        self._cipher = chacha20_keystream(hkdf_key(seed_to_bytes(self.seed), label))
        self.draws = 0
        self.rejected = 0

    @classmethod
    def from_entropy(cls, strong: Optional[bool] = None, label: str = DEFAULT_LABEL) -> "GeneratorState":
        return cls(read_seed(strong), label=label)

    def randbytes(self, n: int) -> bytes:
        return self._cipher.encrypt(b"\x00" * n)

    def randbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        if k == 0:
            return 0
        nbytes = (k + 7) // 8
        x = int.from_bytes(self.randbytes(nbytes), "big")
        return x >> (nbytes * 8 - k)

    def below(self, n: int) -> int:
        """Равномерно из [0, n): берём bit_length(n) бит, всё >= n отбрасываем."""
        if n < 1:
            raise ValueError("upper bound must be positive")
        k = n.bit_length()
        while True:
            x = self.randbits(k)
            if x < n:
                self.draws += 1
                return x
            self.rejected += 1
