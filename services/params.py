# services/params.py
import re
from typing import Tuple
from errors import InvalidNumberError, ParamsFileError

_INT_RE = re.compile(r"[+-]?[0-9]+")

def parse_integer(text: str) -> int:
    """Строго десятичное целое: без '_', пробелов внутри и прочих форм int()."""
    s = text.strip()
    if not _INT_RE.fullmatch(s):
        raise InvalidNumberError(text)
    return int(s)

def read_params_file(path: str) -> Tuple[int, int]:
    """Первые два токена файла -> (low, high); остальное игнорируем."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            tokens = f.read().split()
    except OSError as e:
        raise ParamsFileError(f"{path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise ParamsFileError(f"Could not parse contents of '{path}': {e.reason}") from e
    if len(tokens) < 2:
        raise ParamsFileError(f"Could not parse contents of '{path}'.\nGot {len(tokens)} fields.")
    try:
        return parse_integer(tokens[0]), parse_integer(tokens[1])
    except InvalidNumberError as e:
        raise ParamsFileError(f"Could not parse contents of '{path}': {e}") from e
