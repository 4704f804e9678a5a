"""JSON and YAML renderers over the shared structured form."""

import json

import yaml

from data_dictionary.models import DataDictionary
from data_dictionary.normalizer import to_structured


def render_json(dictionary: DataDictionary) -> str:
    """Serialize the structured dictionary as 2-space indented JSON."""
    return json.dumps(to_structured(dictionary), indent=2, ensure_ascii=False)


def render_yaml(dictionary: DataDictionary) -> str:
    """Serialize the structured dictionary as block-style YAML.

    Key order follows the JSON output so both parse back to the same value.
    """
    return yaml.safe_dump(
        to_structured(dictionary),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
