from pathlib import Path

import yaml
from pydantic import ValidationError

from frontline.config.models import CommandsConfig
from frontline.core.errors import ConfigurationError


def _strip_fence(content: str) -> str:
    # Accept a ```yaml fenced block embedded in a markdown file
    lines = content.splitlines()
    yaml_lines = []
    in_block = False
    found_block = False

    for line in lines:
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def load_config_text(content: str) -> CommandsConfig:
    """
    Parse and validate command configuration from YAML text.
    Raises ConfigurationError if the YAML or the schema is invalid.
    """
    try:
        data = yaml.safe_load(_strip_fence(content))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in commands file: {e}") from e

    try:
        return CommandsConfig.model_validate(data or {})
    except ValidationError as e:
        raise ConfigurationError(f"Commands configuration validation failed:\n{e}") from e


def load_config(path: Path) -> CommandsConfig:
    """
    Load and validate the commands file.
    Raises FileNotFoundError if file missing.
    Raises ConfigurationError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Commands file not found at: {path}")

    with open(path) as f:
        content = f.read()

    return load_config_text(content)
