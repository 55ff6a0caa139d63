"""
Default settings for the indexer and querier.

Each value can be overridden through an environment variable; the command-line
tools accept flags that override these defaults again:
    TSE_INDEX_CAPACITY=500          # Capacity hint for new indexes
    TSE_MIN_WORD_LENGTH=3           # Shorter words are not indexed
    TSE_SHOW_PROGRESS=1             # tqdm progress bar while indexing (0 = off)
    TSE_QUERY_WORKERS=8             # Thread pool size for batch evaluation
    TSE_MIN_QUERIES_FOR_PARALLEL=10 # Smaller batches run sequentially
"""

import os

DEFAULT_INDEX_CAPACITY = int(os.environ.get("TSE_INDEX_CAPACITY", "500"))
DEFAULT_MIN_WORD_LENGTH = int(os.environ.get("TSE_MIN_WORD_LENGTH", "3"))
SHOW_PROGRESS = os.environ.get("TSE_SHOW_PROGRESS", "1") != "0"
DEFAULT_NUM_WORKERS = int(os.environ.get("TSE_QUERY_WORKERS", "8"))
MIN_QUERIES_FOR_PARALLEL = int(os.environ.get("TSE_MIN_QUERIES_FOR_PARALLEL", "10"))

# Page directory layout
CRAWLER_MARKER = ".crawler"

# Querier output
QUERY_PROMPT = "Query? "
QUERY_SEPARATOR = "-" * 47
NO_MATCHES_MESSAGE = "No documents match."
