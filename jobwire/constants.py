"""Constants used throughout the jobwire codebase."""

import re

# An EVM address: 0x followed by exactly 40 hex digits
ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")

# Separator for multi-value textarea input
LINE_SEPARATOR = "\n"

# Price estimate base rate: 0.001 token in wei
BASE_RATE_WEI = 10**15

# Environment variable controlling the log level
LOG_LEVEL_ENV_VAR = "JOBWIRE_LOG_LEVEL"
