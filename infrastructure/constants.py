from pathlib import Path

# Repo-root conventional directories/files (overrideable via explorer.yaml)
CONFIG_DIR = Path("configs")
EXPLORER_CONFIG_FILE = CONFIG_DIR / "explorer.yaml"

DATA_DIR = Path("dataset")
DATA_FILE = Path("verbs.json")
OUTPUT_DIR = Path("outputs")

# Environment override for the verbs document path
DATA_FILE_ENV = "VERB_EXPLORER_DATA_FILE"
