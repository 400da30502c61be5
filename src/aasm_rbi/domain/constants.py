"""Defaults shared by config, emitter, and CLI."""

TOOL_NAME = "aasm-rbi"
CONFIG_SECTION = "aasm-rbi"

DEFAULT_MANIFEST = "sorbet/aasm_manifest.yml"
DEFAULT_OUTPUT_DIR = "sorbet/rails-rbi/models"
DEFAULT_TYPED_SIGIL = "strong"

KNOWN_CONFIG_KEYS = frozenset(
    {"manifest", "output_dir", "typed_sigil", "exclude_models"}
)

RBI_EXTENSION = ".rbi"
RBI_INDENT = "  "

# Parameter name used for the open keyword capture on event methods (**params).
EVENT_PARAMS_NAME = "params"
