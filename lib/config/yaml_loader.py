"""Safe YAML loader."""
from pathlib import Path
from typing import Union

import yaml

from lib.utils.validation import ensure


def load_yaml(path: Union[str, Path]) -> dict:
    """Parse ``path`` with ``yaml.safe_load``; an empty document yields ``{}``."""

    with open(path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    ensure(isinstance(data, dict), f"{path} must contain a mapping at the top level")
    return data
