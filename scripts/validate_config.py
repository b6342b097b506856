#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from array_helpers.config.loader import ConfigLoader
from array_helpers.config.validation import ConfigValidator, ValidationError
from array_helpers.errors import ConfigurationError


def validate_settings(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged settings found in ``config_dir``."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main(argv: Optional[List[str]] = None) -> int:
    """Main validation function."""
    argv = sys.argv[1:] if argv is None else argv
    config_dir = Path(argv[0]) if argv else None

    print("🔍 Validating array_helpers configuration...")

    try:
        errors = validate_settings(config_dir)
    except ConfigurationError as e:
        print(f"❌ Error loading settings: {e}")
        return 1

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        return 1

    print("✅ Configuration is valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
