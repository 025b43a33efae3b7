"""
Configuration loader for quiz grading parameters.

Handles loading and validating quiz configuration files.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from .models import QuizConfig

logger = logging.getLogger(__name__)

API_KEY_ENV = "CODEQUIZ_JUDGE_API_KEY"


def load_config(config_path: Optional[Path] = None) -> QuizConfig:
    """
    Load quiz configuration from a JSON file.

    Args:
        config_path: Path to the configuration file. If None, looks for
                    'config.json' next to the package.

    Returns:
        QuizConfig object with validated configuration. The judge API key
        is taken from the CODEQUIZ_JUDGE_API_KEY environment variable when set.

    Raises:
        ValueError: If config is invalid
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent / "config.json"
    config_path = Path(config_path)

    if not config_path.exists():
        logger.warning(f"Config file '{config_path}' not found. Using default configuration.")
        data = {}
    else:
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file: {e}")
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}")

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a JSON object")

    api_key = os.environ.get(API_KEY_ENV)
    if api_key:
        data = dict(data, judge_api_key=api_key)

    try:
        config = QuizConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid configuration value: {e}")

    is_valid, error_message = config.validate()
    if not is_valid:
        raise ValueError(f"Invalid configuration: {error_message}")

    return config


def create_sample_config(output_path: Path):
    """
    Create a sample configuration file.

    Args:
        output_path: Path where to save the sample config
    """
    sample_config = {
        "heuristic_mode": True,
        "judge_url": "https://judge0-ce.p.rapidapi.com",
        "judge_api_host": "judge0-ce.p.rapidapi.com",
        "judge_timeout_seconds": 5.0,
        "mcq_points": 10,
        "coding_base_points": 20,
        "attempt_penalty": 2,
        "coding_min_points": 5,
        "certificate_threshold": 80,
        "work_dir_postfix": "QUIZ",
        "_comment": "This is a sample quiz configuration. Adjust values as needed.",
        "_instructions": {
            "heuristic_mode": "true grades locally by inspecting the code; false runs it on the remote judge",
            "judge_url": "Base URL of the Judge0-compatible service",
            "judge_api_host": "X-RapidAPI-Host header value",
            "judge_timeout_seconds": "Seconds to wait for the judge before falling back to local grading",
            "mcq_points": "Points for each correct multiple-choice answer",
            "coding_base_points": "Points for a coding question passed on the first attempt",
            "attempt_penalty": "Points deducted per extra attempt on a coding question",
            "coding_min_points": "Minimum points for a passed coding question",
            "certificate_threshold": "Minimum score percentage for a certificate",
            "work_dir_postfix": "Postfix for the student's working directory (e.g., name_surname_POSTFIX)",
            "judge_api_key": f"Not stored here: set the {API_KEY_ENV} environment variable"
        }
    }

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(sample_config, f, indent=2)

    print(f"Sample configuration created at: {output_path}")
