import os
from dataclasses import dataclass, field
from pathlib import Path

from clarity.scoring import SortOrder


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent)

    DICTIONARY_PATH: Path = field(init=False)

    SORT_ORDER: str = SortOrder.ALPHA.value
    MIN_WORD_LENGTH: int = 1
    MAX_RESULTS: int = 0

    WORKERS: int = 1
    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "wordlist.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _convert(getattr(self, fld), env_val))

        if self.SORT_ORDER not in {o.value for o in SortOrder}:
            raise ValueError(f"SORT_ORDER must be one of {_ORDERS}, got {self.SORT_ORDER!r}")


# Fields that may be changed after start-up, with their types
EDITABLE_FIELDS: dict[str, type] = {
    "DICTIONARY_PATH": Path,
    "SORT_ORDER": str,
    "MIN_WORD_LENGTH": int,
    "MAX_RESULTS": int,
    "WORKERS": int,
    "DEBUG": bool,
}

_MINIMUMS = {"MIN_WORD_LENGTH": 1, "MAX_RESULTS": 0, "WORKERS": 1}
_ORDERS = ", ".join(o.value for o in SortOrder)


def _convert(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    elif isinstance(current, int):
        return int(value)
    elif isinstance(current, float):
        return float(value)
    elif isinstance(current, Path):
        return Path(value)
    return str(value)


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply values to cfg. Returns an error message per field that was rejected.

    Accepted fields are applied even when others in the same call are rejected.
    """
    errors = {}
    for name, value in values.items():
        if not hasattr(cfg, name):
            errors[name] = "unknown setting"
            continue
        if name not in EDITABLE_FIELDS:
            errors[name] = "not editable"
            continue
        try:
            converted = _convert(getattr(cfg, name), value)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid value {value!r}: {e}"
            continue
        if name == "SORT_ORDER" and converted not in {o.value for o in SortOrder}:
            errors[name] = f"must be one of {_ORDERS}"
            continue
        if name in _MINIMUMS and converted < _MINIMUMS[name]:
            errors[name] = f"must be >= {_MINIMUMS[name]}"
            continue
        setattr(cfg, name, converted)
    return errors


settings = Settings()
