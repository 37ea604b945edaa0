# errors.py


class UniqrandError(Exception):
    """Базовая ошибка; на границе CLI превращается в exit(1)."""


class ValidationError(UniqrandError, ValueError):
    pass


class InvalidNumberError(ValidationError):
    def __init__(self, text: str):
        super().__init__(f"Could not parse '{text}' into a number.")
        self.text = text


class InvalidRangeError(ValidationError):
    def __init__(self, low: int, high: int):
        super().__init__(f"Lower bound ({low}) must be less than upper bound ({high}).")
        self.low = low
        self.high = high


class InvalidCountError(ValidationError):
    def __init__(self, count: int):
        super().__init__(f"Count ({count}) must not be negative.")
        self.count = count


class CountTooLargeError(ValidationError):
    def __init__(self, count: int, size: int):
        super().__init__(
            f"Size given ({count}) exceeds range ({size}).\n"
            "No unique random numbers can be generated."
        )
        self.count = count
        self.size = size


class ResourceError(UniqrandError, RuntimeError):
    pass


class EntropyError(ResourceError):
    pass


class ParamsFileError(ResourceError):
    pass


class AllocationError(ResourceError):
    def __init__(self):
        super().__init__("Could not allocate memory for the working set.")
