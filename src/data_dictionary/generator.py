"""Public entry point: collect a schema and render it in the configured format."""

import logging
from typing import Optional, Union

from data_dictionary.collector import SchemaCollector, SupportsLogging
from data_dictionary.config.settings import GeneratorConfig
from data_dictionary.introspection.base import SchemaIntrospector
from data_dictionary.models import DataDictionary
from data_dictionary.renderers import render

module_logger = logging.getLogger(__name__)


class DataDictionaryGenerator:
    """Generates a data dictionary for the database behind an introspector."""

    def __init__(
        self,
        introspector: SchemaIntrospector,
        config: Optional[GeneratorConfig] = None,
        logger: Optional[SupportsLogging] = None,
    ):
        """Initialize the generator.

        Args:
            introspector: Read-only schema introspection capability.
            config: Generation options (defaults to JSON output).
            logger: Logger for progress and failure events.
        """
        self.introspector = introspector
        self.config = config or GeneratorConfig()
        self.logger = logger or module_logger
        self.logger.info("DataDictionaryGenerator initialized (format=%s)", self.config.format.value)

    async def generate_data_dictionary(self) -> Union[str, DataDictionary]:
        """Collect the schema and render it.

        Returns:
            Rendered text for json/yaml/markdown, or the unserialized
            DataDictionary for the raw fallback.

        Raises:
            IntrospectionError: If any introspection call fails. No partial
                output is produced.
        """
        collector = SchemaCollector(
            self.introspector,
            logger=self.logger,
            exclude_tables=self.config.exclude_tables,
        )
        dictionary = await collector.collect()
        return self.format_data_dictionary(dictionary)

    def format_data_dictionary(self, dictionary: DataDictionary) -> Union[str, DataDictionary]:
        """Render a collected dictionary in the configured format."""
        return render(dictionary, self.config.format)


async def generate_data_dictionary(
    introspector: SchemaIntrospector,
    config: Optional[GeneratorConfig] = None,
    logger: Optional[SupportsLogging] = None,
) -> Union[str, DataDictionary]:
    """Generate a data dictionary in one call."""
    generator = DataDictionaryGenerator(introspector, config=config, logger=logger)
    return await generator.generate_data_dictionary()
