#!/usr/bin/env python3
"""
Bundled Phonologies
===================
Phonology files shipped with namesmith, one YAML or JSON file per language.

Usage:
    from namesmith.phonologies import list_phonologies, load_bundled

    list_phonologies()          # ['english', 'sylvan', ...]
    raw = load_bundled('english')
"""

import json
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
from functools import lru_cache


# =============================================================================
# Configuration Path
# =============================================================================

PHONOLOGIES_DIR = Path(__file__).parent
SUFFIXES = ('.yaml', '.yml', '.json')


def list_phonologies() -> List[str]:
    """Names of all bundled phonologies, sorted."""
    return sorted(
        p.stem for p in PHONOLOGIES_DIR.iterdir()
        if p.suffix in SUFFIXES and not p.name.startswith('_')
    )


def bundled_path(name: str) -> Optional[Path]:
    """Path of a bundled phonology, or None if there is none by that name."""
    for suffix in SUFFIXES:
        path = PHONOLOGIES_DIR / f"{name}{suffix}"
        if path.exists():
            return path
    return None


def parse_phonology_text(text: str, suffix: str) -> Any:
    """
    Parse phonology file contents by file suffix.

    ``.json`` goes through the json module; anything else through PyYAML.
    Raises json.JSONDecodeError or yaml.YAMLError on bad syntax.
    """
    if suffix.lower() == '.json':
        return json.loads(text)
    return yaml.safe_load(text)


@lru_cache(maxsize=10)
def _load_file(filename: str) -> Dict[str, Any]:
    """Load a phonology file from the phonologies directory."""
    filepath = PHONOLOGIES_DIR / filename
    return parse_phonology_text(filepath.read_text(encoding='utf-8'), filepath.suffix) or {}


def load_bundled(name: str) -> Dict[str, Any]:
    """
    Load the raw mapping of a bundled phonology.

    Raises
    ------
    FileNotFoundError
        If no bundled phonology has that name.
    """
    path = bundled_path(name)
    if path is None:
        available = ', '.join(list_phonologies())
        raise FileNotFoundError(f"Unknown phonology '{name}'. Available phonologies: {available}")
    return _load_file(path.name)


__all__ = [
    'PHONOLOGIES_DIR',
    'list_phonologies',
    'bundled_path',
    'load_bundled',
    'parse_phonology_text',
]
