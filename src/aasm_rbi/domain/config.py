"""Configuration for generation settings. Immutable value object created by Infrastructure."""

import logging

from aasm_rbi.domain.constants import (
    DEFAULT_MANIFEST,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_TYPED_SIGIL,
    KNOWN_CONFIG_KEYS,
)


class ConfigurationLoader:
    """
    Immutable configuration for generation settings.

    Created by Infrastructure from the [tool.aasm-rbi] table. Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        """Set config once at construction. No mutable class or instance state after init."""
        self._config = config_dict
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about keys this tool does not read."""
        for key in sorted(set(config) - KNOWN_CONFIG_KEYS):
            logging.warning(
                "Configuration Warning: unknown key '%s' in [tool.aasm-rbi] is ignored.", key
            )

    def _string_option(self, key: str, default: str) -> str:
        raw = self._config.get(key)
        if isinstance(raw, str) and raw.strip():
            return raw.strip()
        return default

    @property
    def manifest_path(self) -> str:
        """Path to the state-machine manifest, relative to the working directory."""
        return self._string_option("manifest", DEFAULT_MANIFEST)

    @property
    def output_dir(self) -> str:
        """Directory that receives one .rbi file per model."""
        return self._string_option("output_dir", DEFAULT_OUTPUT_DIR)

    @property
    def typed_sigil(self) -> str:
        """Sorbet strictness written into each generated file (# typed: <sigil>)."""
        return self._string_option("typed_sigil", DEFAULT_TYPED_SIGIL)

    @property
    def exclude_models(self) -> list[str]:
        """Model ids the generator never processes."""
        raw = self._config.get("exclude_models", [])
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return []
