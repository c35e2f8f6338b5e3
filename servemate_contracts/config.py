import os
from dotenv import load_dotenv

load_dotenv()


def _get_int(name: str, default: int) -> int:
    """Read a positive int from the environment."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")
    if value < 1:
        raise RuntimeError(f"{name} must be >= 1, got {value}")
    return value


class Config:
    # Pagination bounds shared by every search schema
    DEFAULT_PAGE_SIZE = _get_int('CONTRACT_DEFAULT_PAGE_SIZE', 10)
    MAX_PAGE_SIZE = _get_int('CONTRACT_MAX_PAGE_SIZE', 100)

    # Log a DEBUG record for every failed parse (schema name + violation count)
    LOG_VIOLATIONS = os.getenv('CONTRACT_LOG_VIOLATIONS', 'true').lower() == 'true'

    # Separator for delimited query-string lists ("GLUTEN,DAIRY")
    LIST_SEPARATOR = os.getenv('CONTRACT_LIST_SEPARATOR', ',') or ','

    if DEFAULT_PAGE_SIZE > MAX_PAGE_SIZE:
        raise RuntimeError(
            f"CONTRACT_DEFAULT_PAGE_SIZE ({DEFAULT_PAGE_SIZE}) exceeds "
            f"CONTRACT_MAX_PAGE_SIZE ({MAX_PAGE_SIZE})"
        )
