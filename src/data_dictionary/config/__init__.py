from data_dictionary.config.settings import GeneratorConfig, OutputFormat

__all__ = ["GeneratorConfig", "OutputFormat"]
