"""
Project configuration settings.

Values are read from the environment (and from a `.env` file in the
working directory, if present).  Keeping configuration in one place
makes it easy to override default behaviour without modifying
individual modules; the classification components themselves take
explicit arguments and never read this module.
"""

from pathlib import Path
import os

from dotenv import load_dotenv

load_dotenv()

# Base directory for storing input and output data.
BASE_DIR: Path = Path(__file__).resolve().parents[1]

###############################################################################
# Directory paths
###############################################################################

# Training and inference spreadsheets
DATA_DIR: Path = Path(os.getenv("SENTIMENT_DATA_DIR", BASE_DIR / "data"))

# Predictions and training reports
RESULTS_DIR: Path = Path(os.getenv("SENTIMENT_RESULTS_DIR", BASE_DIR / "results"))

# Create directories if they do not already exist
for _dir in (DATA_DIR, RESULTS_DIR):
    _dir.mkdir(parents=True, exist_ok=True)

###############################################################################
# Files
###############################################################################

TRAINING_DATA_FILE: Path = Path(
    os.getenv("SENTIMENT_TRAINING_FILE", DATA_DIR / "training_data.xlsx")
)
INPUT_DATA_FILE: Path = Path(
    os.getenv("SENTIMENT_INPUT_FILE", DATA_DIR / "employee_reviews.xlsx")
)
OUTPUT_FILE: Path = Path(
    os.getenv("SENTIMENT_OUTPUT_FILE", RESULTS_DIR / "prediction_results.xlsx")
)

###############################################################################
# Classifier selection
###############################################################################

# "local" trains a model on TRAINING_DATA_FILE; "llm" asks a hosted
# completion endpoint instead and needs OPENAI_API_KEY.
CLASSIFIER_BACKEND: str = os.getenv("SENTIMENT_CLASSIFIER", "local")

OPENAI_API_KEY: str | None = os.getenv("OPENAI_API_KEY")
LLM_ENDPOINT: str = os.getenv("LLM_ENDPOINT", "https://api.openai.com/v1/completions")
LLM_MODEL: str = os.getenv("LLM_MODEL", "gpt-3.5-turbo-instruct")
LLM_TIMEOUT: float = float(os.getenv("LLM_TIMEOUT", "30"))
LLM_MAX_RETRIES: int = int(os.getenv("LLM_MAX_RETRIES", "5"))


def remote_options() -> dict:
    """Keyword arguments for `RemoteLLMClassifier` built from the settings above."""
    return {
        "api_key": OPENAI_API_KEY,
        "endpoint": LLM_ENDPOINT,
        "model_name": LLM_MODEL,
        "timeout": LLM_TIMEOUT,
        "max_retries": LLM_MAX_RETRIES,
    }
