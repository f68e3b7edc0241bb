"""
Package-wide defaults for the corpus and reporting helpers.
"""

# Where charts are written
OUTPUT_DIR = 'output'

# Reporting
DEFAULT_TOP_N = 12
PLOT_DPI = 180
BAR_COLOR = '#5178c6'

# Vocabulary filtering
DEFAULT_MAX_VOCAB = 5000   # keep at most this many words
DEFAULT_MIN_DF = 1         # minimum number of documents a word must appear in
