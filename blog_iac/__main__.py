"""
Pulumi program entry point for the game blog infrastructure.

Loads stack configuration, declares every component through
build_infrastructure(), exports the results and mirrors them into
infrastructure.env for local tooling.
"""

import pulumi

from blog_iac.configs.environment import get_config
from blog_iac.deployment import build_infrastructure
from blog_iac.utils.logger import configure_logging
from blog_iac.utils.naming import ResourceNamer
from blog_iac.utils.outputs import write_outputs_to_env


def main() -> None:
    """Deploy the game blog infrastructure."""
    configure_logging()

    config = get_config()
    namer = ResourceNamer(project="game-blog", environment=config.environment)

    pulumi.log.info(f"Declaring game blog stack for environment '{config.environment}'")
    outputs = build_infrastructure(config, namer).exports()

    # Write outputs to .env file for local development
    write_outputs_to_env(outputs, "infrastructure.env")

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)


# Execute
main()
