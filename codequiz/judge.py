"""
Remote code-execution judge client (Judge0 API)
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

import httpx

from .connectivity import check_host_reachable
from .errors import JudgeError, UnsupportedLanguageError

logger = logging.getLogger(__name__)

JUDGE_LANGUAGE_IDS: Dict[str, int] = {
    "javascript": 63,
    "python": 71,
    "java": 62,
    "csharp": 51,
    "cpp": 54,
    "c": 50,
    "typescript": 74,
}

ACCEPTED_STATUS = "Accepted"
TEST_CASE_MARKER = "Test case"


def language_id_for(language: str) -> int:
    """Return the judge's numeric language id, raising for unmapped languages."""
    try:
        return JUDGE_LANGUAGE_IDS[language]
    except KeyError:
        raise UnsupportedLanguageError(language) from None


@dataclass
class JudgeResult:
    """The parts of a judge submission response the grader cares about."""
    status_description: str
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    compile_output: Optional[str] = None

    @staticmethod
    def from_response(data: Any) -> 'JudgeResult':
        """Create a JudgeResult from the decoded JSON body."""
        if not isinstance(data, dict):
            raise JudgeError(f"Unexpected judge response type: {type(data).__name__}")
        status = data.get("status") or {}
        if not isinstance(status, dict):
            raise JudgeError("Judge response has a malformed status field")
        for name in ("stdout", "stderr", "compile_output"):
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise JudgeError(f"Judge response field '{name}' is not text")
        return JudgeResult(
            status_description=str(status.get("description", "")),
            stdout=data.get("stdout"),
            stderr=data.get("stderr"),
            compile_output=data.get("compile_output"),
        )

    @property
    def accepted(self) -> bool:
        return self.status_description == ACCEPTED_STATUS

    def test_case_lines(self) -> List[str]:
        """Lines of stdout that report a test case outcome."""
        if not self.stdout:
            return []
        return [line.strip() for line in self.stdout.split("\n") if TEST_CASE_MARKER in line]


class JudgeClient:
    """Synchronous client for a Judge0-compatible submissions endpoint"""

    def __init__(self, base_url: str, api_key: str = "", api_host: str = "",
                 timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.api_host = api_host or (urlparse(self.base_url).hostname or "")
        self.timeout = timeout
        logger.info(f"Judge client: url={self.base_url} timeout={timeout}s")

    @staticmethod
    def from_config(config) -> 'JudgeClient':
        return JudgeClient(
            base_url=config.judge_url,
            api_key=config.judge_api_key,
            api_host=config.judge_api_host,
            timeout=config.judge_timeout_seconds,
        )

    def is_reachable(self) -> bool:
        """Probe the judge host with a plain TCP connection."""
        parsed = urlparse(self.base_url)
        if not parsed.hostname:
            return False
        port = parsed.port or (443 if parsed.scheme == "https" else 80)
        return check_host_reachable(parsed.hostname, port, timeout=min(self.timeout, 2.0))

    def submit(self, source: str, language: str, stdin: str = "") -> JudgeResult:
        """
        Run source code on the judge and wait for the result.

        Raises:
            UnsupportedLanguageError: If the language has no judge id
            JudgeError: On transport errors, non-success statuses or malformed bodies
        """
        language_id = language_id_for(language)
        url = f"{self.base_url}/submissions/"

        headers = {
            "Content-Type": "application/json",
            "X-RapidAPI-Host": self.api_host,
            "X-RapidAPI-Key": self.api_key,
        }

        payload = {
            "source_code": source,
            "language_id": language_id,
            "stdin": stdin,
        }

        try:
            response = httpx.post(
                url,
                params={"base64_encoded": "false", "wait": "true"},
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise JudgeError(f"Judge API error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise JudgeError(f"Judge API request failed: {e}") from e
        except ValueError as e:
            raise JudgeError(f"Judge API returned invalid JSON: {e}") from e

        result = JudgeResult.from_response(data)
        logger.debug(f"Judge status for {language}: {result.status_description}")
        return result
