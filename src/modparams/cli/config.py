"""Configuration handling for the modparams CLI.

Reads default arguments from the ``[tool.modparams]`` table of
pyproject.toml:

    [tool.modparams]
    args = ["test=5", "latest=1,2,3"]

Defaults are parsed before command-line arguments, so the command line
overrides them.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
import tomllib


def read_pyproject(root: Optional[Path] = None) -> Dict[str, Any]:
    """Read pyproject.toml configuration.

    Args:
        root: Directory containing pyproject.toml (defaults to cwd)

    Returns:
        The [tool.modparams] section, or empty dict if not found

    Raises:
        FileNotFoundError: If pyproject.toml doesn't exist
        tomllib.TOMLDecodeError: If TOML is malformed
    """
    root = Path(root) if root is not None else Path.cwd()
    pyproject_path = root / "pyproject.toml"

    if not pyproject_path.exists():
        raise FileNotFoundError(f"pyproject.toml not found in {root}")

    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)

    return data.get("tool", {}).get("modparams", {})


def validate_config(config: Dict[str, Any]) -> List[str]:
    """Validate modparams configuration.

    Args:
        config: The [tool.modparams] configuration

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    args = config.get("args", [])
    if not isinstance(args, list):
        errors.append("'args' must be a list of strings")
        return errors

    for i, arg in enumerate(args):
        if not isinstance(arg, str):
            errors.append(f"args[{i}] must be a string, got {type(arg).__name__}")

    unknown = sorted(set(config) - {"args"})
    if unknown:
        errors.append(f"Unknown configuration keys: {', '.join(unknown)}")

    return errors


def default_args(root: Optional[Path] = None) -> List[str]:
    """Return the configured default arguments.

    A missing pyproject.toml or missing table means no defaults.

    Raises:
        ValueError: If the configuration is invalid
    """
    try:
        config = read_pyproject(root)
    except FileNotFoundError:
        return []

    errors = validate_config(config)
    if errors:
        raise ValueError("Invalid [tool.modparams] configuration: " + "; ".join(errors))
    return list(config.get("args", []))
