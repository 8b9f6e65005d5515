"""Global constants for parallaxer.

Centralizes names shared between the chain config format, the sampling
tables and the CLI.
"""

# Table section holding named chains in pyproject.toml ([tool.parallaxer.chain])
TOOL_SECTION: str = "parallaxer"
CHAIN_SECTION: str = "chain"

# Column names in sampled chain tables
INPUT_COL: str = "input"
POSITION_COL_PREFIX: str = "position_"
VALUE_COL: str = "value"

# Default number of evenly spaced inputs when tabulating a chain
DEFAULT_SAMPLE_POINTS: int = 11
