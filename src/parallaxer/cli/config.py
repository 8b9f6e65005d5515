"""Configuration handling for the parallaxer CLI.

Reads and writes named chains in pyproject.toml ([tool.parallaxer.chain.<name>])
or in a standalone TOML file ([chain.<name>]).
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
import tomllib
import toml

from ..chain import Chain
from ..constants import CHAIN_SECTION, TOOL_SECTION
from ..errors import ChainConfigError

logger = logging.getLogger(__name__)


def read_pyproject() -> Dict[str, Any]:
    """Read pyproject.toml configuration.

    Returns:
        The [tool.parallaxer] section, or empty dict if not found

    Raises:
        FileNotFoundError: If pyproject.toml doesn't exist
        tomllib.TOMLDecodeError: If TOML is malformed
    """
    pyproject_path = Path.cwd() / "pyproject.toml"

    if not pyproject_path.exists():
        raise FileNotFoundError("pyproject.toml not found in current directory")

    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)

    return data.get("tool", {}).get(TOOL_SECTION, {})


def read_chain_file(path: Path) -> Dict[str, Any]:
    """Read a standalone chain file.

    The file holds chains at the top level ([chain.<name>]), or is a
    pyproject.toml with a [tool.parallaxer] section.

    Returns:
        Config section containing a ``chain`` table
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Chain file not found: {path}")

    with open(path, "rb") as f:
        data = tomllib.load(f)

    if TOOL_SECTION in data.get("tool", {}):
        return data["tool"][TOOL_SECTION]
    return data


def load_chains(config: Mapping[str, Any]) -> Dict[str, Chain]:
    """Build every chain declared in a config section.

    Raises:
        ChainConfigError: On the first malformed chain
    """
    chains = config.get(CHAIN_SECTION, {})
    if not isinstance(chains, Mapping):
        raise ChainConfigError(f"'{CHAIN_SECTION}' must be a table of named chains")

    loaded = {name: Chain.from_config(data, name=name) for name, data in chains.items()}
    logger.info(f"Loaded {len(loaded)} chain(s): {sorted(loaded)}")
    return loaded


def load_chain(name: str, path: Optional[Path] = None) -> Chain:
    """Load one named chain from ``path`` or from pyproject.toml.

    Raises:
        KeyError: If no chain has that name
    """
    config = read_chain_file(path) if path is not None else read_pyproject()
    chains = config.get(CHAIN_SECTION, {})
    if name not in chains:
        raise KeyError(f"Unknown chain: {name}. Available: {sorted(chains)}")
    return Chain.from_config(chains[name], name=name)


def write_chain_config(chain: Chain) -> Path:
    """Add or replace ``chain`` in pyproject.toml.

    Returns:
        Path of the written pyproject.toml
    """
    if not chain.name:
        raise ValueError("Chain must be named to be written to config")

    pyproject_path = Path.cwd() / "pyproject.toml"

    # Read existing config or create new
    if pyproject_path.exists():
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    else:
        data = {}

    section = data.setdefault("tool", {}).setdefault(TOOL_SECTION, {})
    chains = section.setdefault(CHAIN_SECTION, {})
    if chain.name in chains:
        logger.info(f"Replacing existing chain '{chain.name}'")
    chains[chain.name] = chain.to_config()

    with open(pyproject_path, "w", encoding="utf-8") as f:
        toml.dump(data, f)

    return pyproject_path


def validate_config(config: Mapping[str, Any]) -> List[str]:
    """Validate a parallaxer config section.

    Args:
        config: The [tool.parallaxer] configuration

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    chains = config.get(CHAIN_SECTION)
    if chains is None:
        errors.append(f"Missing '{CHAIN_SECTION}' table")
        return errors
    if not isinstance(chains, Mapping):
        errors.append(f"'{CHAIN_SECTION}' must be a table of named chains")
        return errors

    for name, data in chains.items():
        try:
            Chain.from_config(data, name=name)
        except ChainConfigError as e:
            errors.append(str(e))

    return errors
