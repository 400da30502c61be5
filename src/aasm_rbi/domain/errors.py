"""Error taxonomy for the host side of generation. The synthesizer itself raises nothing."""


class AasmRbiError(Exception):
    """Base class for errors the CLI reports as a failed run."""


class ManifestError(AasmRbiError):
    """The state-machine manifest is missing, unreadable, or structurally wrong."""


class UnknownModelError(AasmRbiError):
    """A model id was asked for that the registry does not know."""


class UnknownStateMachineError(AasmRbiError):
    """A machine name was asked for that the model does not own."""


class InvalidDeclarationError(AasmRbiError):
    """The emitter refused a class or method name."""
