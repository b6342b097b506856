"""Pytest configuration and shared fixtures."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

import pytest
import yaml


@dataclass
class Item:
    """Plain record exposing fields as attributes."""
    id: Any
    name: str = ""


@pytest.fixture
def sample_votes() -> Dict[str, int]:
    """Vote counts whose shares need normalization."""
    return {"yes": 1, "no": 1, "abstain": 1}


@pytest.fixture
def sample_items() -> List[Item]:
    """Records with distinct ids, in a fixed order."""
    return [Item(1, "first"), Item(2, "second"), Item(3, "third")]


@pytest.fixture
def write_settings(tmp_path: Path):
    """Write a settings.yaml into a temporary config directory."""
    def _write(settings: Any) -> Path:
        (tmp_path / "settings.yaml").write_text(yaml.safe_dump(settings))
        return tmp_path
    return _write
