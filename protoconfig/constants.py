"""Defaults shared across protoconfig modules."""

from typing import Any

# Maximum size of text accepted by ProtoConfig.from_json/from_yaml (10MB)
MAX_DOCUMENT_SIZE_BYTES = 10 * 1024 * 1024

# Keyword defaults for json.dumps; per-call kwargs take precedence
JSON_DUMP_DEFAULTS: dict[str, Any] = {
    "ensure_ascii": False,
}

# Keyword defaults for yaml.dump; insertion order is kept so output follows to_dict()
YAML_DUMP_DEFAULTS: dict[str, Any] = {
    "default_flow_style": False,
    "sort_keys": False,
    "allow_unicode": True,
}
