#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from asset_predictor.config.loader import ConfigLoader
from asset_predictor.config.validation import ConfigValidator


def main() -> int:
    """Main validation function."""
    config_dir = sys.argv[1] if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating configuration in {loader.config_dir}...")

    try:
        config = loader.merge_config()
    except Exception as e:
        print(f"❌ Could not load configuration: {e}")
        return 1

    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        return 1

    print("✅ Configuration is valid")
    print(f"   default mode: {config['prediction']['default_mode']}")
    print(f"   display precision: {config['prediction']['display_precision']}")
    print(f"   log level: {config['logging']['level']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
