"""Application-level constants."""

# Output filenames
COVERAGE_FILENAME = "level_coverage.csv"
LOG_FILENAME = "explorer.log"

# Source label for documents loaded from memory
IN_MEMORY_SOURCE = "<memory>"
