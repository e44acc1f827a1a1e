"""
DataMind Constants.

This module defines the policy thresholds, display defaults and other magic
numbers used throughout the analysis engine. Centralizing these values keeps
the detection policy tunable without touching the algorithms that use them.
"""

# ============================================================================
# Insight Policy Thresholds
# ============================================================================

# A numeric column is flagged as having extreme variance when its range
# (max - min) exceeds the mean multiplied by this factor
VARIANCE_MULTIPLIER: float = 5.0

# Minimum number of numeric values before the variance rule is evaluated
MIN_VALUES_FOR_VARIANCE: int = 10

# Unique-to-row ratio above which a categorical column looks like an ID/key
# (strictly greater than, 0.8 itself does not fire)
CARDINALITY_THRESHOLD: float = 0.8

# Absolute Pearson r above which a pair is reported as strongly correlated
CORRELATION_THRESHOLD: float = 0.8

# The dataset volume summary is emitted when row count exceeds this value
MIN_ROWS_FOR_VOLUME_INSIGHT: int = 10


# ============================================================================
# Correlation Constants
# ============================================================================

# Fewer complete-case pairs than this yields a correlation of 0
MIN_CORRELATION_PAIRS: int = 2


# ============================================================================
# Display Constants
# ============================================================================

# Decimal places used when rendering numeric statistics
DISPLAY_DECIMALS: int = 2

# Decimal places used when rendering the missing percentage
MISSING_PCT_DECIMALS: int = 1

# Marker wrapped around key terms in insight and answer text
EMPHASIS_MARKER: str = "**"


# ============================================================================
# Categorical Mode Tie-Break
# ============================================================================

# last_seen: among equally frequent values, the one whose final occurrence is
#            latest in row order wins
# smallest:  among equally frequent values, the smallest text value wins
MODE_TIE_BREAK_LAST_SEEN: str = "last_seen"
MODE_TIE_BREAK_SMALLEST: str = "smallest"
MODE_TIE_BREAKS: list = [MODE_TIE_BREAK_LAST_SEEN, MODE_TIE_BREAK_SMALLEST]
DEFAULT_MODE_TIE_BREAK: str = MODE_TIE_BREAK_LAST_SEEN


# ============================================================================
# Conversation Constants
# ============================================================================

# Default artificial delay before an answer is appended (seconds)
DEFAULT_RESPONSE_DELAY: float = 0.0

# Words that end an interactive chat session
CHAT_EXIT_WORDS: list = ["exit", "quit"]


# ============================================================================
# Configuration Security Limits
# ============================================================================

# Maximum YAML configuration file size (1MB)
# An analysis config holds a handful of thresholds; anything larger is rejected
MAX_YAML_FILE_SIZE: int = 1 * 1024 * 1024


# ============================================================================
# Logging Constants
# ============================================================================

# Default log message format
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Log date format
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


# ============================================================================
# File Format Constants
# ============================================================================

# Formats the loading collaborator hands to pandas
SUPPORTED_FILE_FORMATS: list = ["csv", "json"]

# File extension to format mapping
FILE_EXTENSION_MAP: dict = {
    ".csv": "csv",
    ".tsv": "csv",
    ".txt": "csv",
    ".json": "json",
    ".jsonl": "json",
    ".ndjson": "json",
}


# ============================================================================
# Report Constants
# ============================================================================

REPORT_TITLE: str = "DataMind Analysis Report"
REPORT_INSIGHTS_HEADER: str = "AI Insights"
REPORT_DATE_FORMAT: str = "%Y-%m-%d"
