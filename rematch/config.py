"""
Matcher Configuration

Operator characters, logging defaults and command line exit codes.
There are no environment variables and no persisted settings.
"""


# ═══════════════════════════════════════════════════════════════════════════════
# OPERATORS
# ═══════════════════════════════════════════════════════════════════════════════

# Matches any single character
ANY_CHAR: str = "."

# Zero or more of the preceding character
REPEAT: str = "*"

# Beginning / end of text
START_ANCHOR: str = "^"
END_ANCHOR: str = "$"


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGING CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

# Log level for the command line front end
LOG_LEVEL: str = "WARNING"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

LOG_FORMAT: str = "%(asctime)s | %(name)-17s | %(levelname)-8s | %(message)s"
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


# ═══════════════════════════════════════════════════════════════════════════════
# EXIT CODES
# ═══════════════════════════════════════════════════════════════════════════════

# Same convention as grep
EXIT_MATCH: int = 0
EXIT_NO_MATCH: int = 1
EXIT_ERROR: int = 2


# ═══════════════════════════════════════════════════════════════════════════════
# HELPER FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════

def validate_config():
    """Validate configuration on import"""
    ops = [ANY_CHAR, REPEAT, START_ANCHOR, END_ANCHOR]
    assert all(len(op) == 1 for op in ops), "operators must be single characters"
    assert len(set(ops)) == len(ops), "operators must be distinct"
    assert len({EXIT_MATCH, EXIT_NO_MATCH, EXIT_ERROR}) == 3, "exit codes must be distinct"


# Validate on import
validate_config()
