"""
Stack output helpers.

Writes resolved stack outputs to a dotenv-style file so local tooling
(bastion scripts, the function's local runner) can read endpoints without
calling `pulumi stack output`.
"""

from pathlib import Path

import pulumi

from blog_iac.utils.logger import get_logger

logger = get_logger(__name__)


def format_env_lines(values: dict[str, object]) -> str:
    """
    Render a mapping as KEY=value lines.

    Keys are upper-cased; None values are skipped.
    """
    lines = [
        f"{key.upper()}={value}"
        for key, value in sorted(values.items())
        if value is not None
    ]
    return "\n".join(lines) + "\n"


def write_outputs_to_env(
    outputs: dict[str, pulumi.Input[object]],
    filename: str,
) -> pulumi.Output[str]:
    """
    Write stack outputs to an env file once they resolve.

    Skipped during preview, where most values are still unknown.

    Args:
        outputs: Export name to value (plain or Output)
        filename: Target file path, relative to the working directory

    Returns:
        Output resolving to the written file path
    """
    keys = list(outputs.keys())

    def _write(values: list[object]) -> str:
        path = Path(filename)
        if pulumi.runtime.is_dry_run():
            logger.debug("write_outputs_to_env - Preview, not writing %s", path)
            return str(path)
        path.write_text(format_env_lines(dict(zip(keys, values))))
        logger.info("write_outputs_to_env - Wrote %d outputs to %s", len(keys), path)
        return str(path)

    return pulumi.Output.all(*outputs.values()).apply(_write)
