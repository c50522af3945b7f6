"""Generate JSON schemas from Pydantic models and save to schemas/ directory."""

import json
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from flexrecord.kernel.key_mapping import KeyMapping
from flexrecord.reviews import PROGRESSIVE_REVIEW_KEYS, ProgressiveReviewFields


def generate_schemas():
    """Generate JSON schemas for the key mapping document and the review model."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    # Key mapping document schema
    mapping_schema = KeyMapping.model_json_schema()
    mapping_schema_path = schemas_dir / "key_mapping.schema.json"
    with open(mapping_schema_path, 'w', encoding='utf-8') as f:
        json.dump(mapping_schema, f, indent=2, ensure_ascii=False)
    print(f"Generated: {mapping_schema_path}")

    # Progressive review typed fields schema
    review_schema = ProgressiveReviewFields.model_json_schema()
    review_schema_path = schemas_dir / "progressive_review_fields.schema.json"
    with open(review_schema_path, 'w', encoding='utf-8') as f:
        json.dump(review_schema, f, indent=2, ensure_ascii=False)
    print(f"Generated: {review_schema_path}")

    # Default mapping as a loadable document
    default_mapping_path = schemas_dir / "progressive_review_keys.json"
    with open(default_mapping_path, 'w', encoding='utf-8') as f:
        json.dump(PROGRESSIVE_REVIEW_KEYS.model_dump(), f, indent=2, ensure_ascii=False)
    print(f"Generated: {default_mapping_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
