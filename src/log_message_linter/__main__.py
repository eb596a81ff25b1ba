"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging

from log_message_linter.infrastructure.di.container import LogLintContainer
from log_message_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    container = LogLintContainer.get_instance()

    deps = CLIDependencies(
        classifier=container.get_classifier(),
        config_resolver=container.get_config_resolver(),
        astroid_gateway=container.get_astroid_gateway(),
        filesystem=container.get_filesystem_gateway(),
        fixer_gateway=container.get_fixer_gateway(),
        reporter=container.get_reporter(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
