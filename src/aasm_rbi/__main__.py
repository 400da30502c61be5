"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from aasm_rbi.infrastructure.di.container import AasmRbiContainer
from aasm_rbi.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = AasmRbiContainer()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        filesystem=container.get_filesystem_gateway(),
        synthesizer=container.get_synthesizer(),
        emitter=container.get_emitter(),
        registry_factory=container.create_registry,
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
