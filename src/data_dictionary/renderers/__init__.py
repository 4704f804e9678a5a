"""Output renderers for collected data dictionaries."""

from typing import Callable, Dict, Union

from data_dictionary.config.settings import OutputFormat
from data_dictionary.models import DataDictionary
from data_dictionary.renderers.markdown import render_markdown
from data_dictionary.renderers.mermaid import render_diagram
from data_dictionary.renderers.structured import render_json, render_yaml

RENDERERS: Dict[OutputFormat, Callable[[DataDictionary], str]] = {
    OutputFormat.JSON: render_json,
    OutputFormat.YAML: render_yaml,
    OutputFormat.MARKDOWN: render_markdown,
}


def render(dictionary: DataDictionary, output_format: OutputFormat) -> Union[str, DataDictionary]:
    """Render a dictionary, or return it unchanged for the raw fallback."""
    renderer = RENDERERS.get(output_format)
    if renderer is None:
        return dictionary
    return renderer(dictionary)


__all__ = [
    "RENDERERS",
    "render",
    "render_diagram",
    "render_json",
    "render_markdown",
    "render_yaml",
]
