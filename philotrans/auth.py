"""
Key Authorization Module
Key-selection capability and detection of authorization failures
"""
import os
from typing import Optional, Protocol

from dotenv import load_dotenv
from google.genai import errors as genai_errors
from rich.console import Console

from .errors import AuthorizationError

console = Console()

# Known failure phrase returned when the selected key cannot reach the model
AUTH_FAILURE_PHRASE = "Requested entity was not found"
AUTH_FAILURE_CODES = {401, 403}


class KeySelector(Protocol):
    def has_selected_api_key(self) -> bool: ...

    def open_select_key(self) -> None: ...


class EnvKeySelector:
    """Key is selected when GEMINI_API_KEY is set; selection re-reads .env"""

    def __init__(self, env_var: str = "GEMINI_API_KEY", dotenv_path: Optional[str] = None):
        self.env_var = env_var
        self.dotenv_path = dotenv_path

    def has_selected_api_key(self) -> bool:
        return bool(os.getenv(self.env_var))

    def open_select_key(self) -> None:
        load_dotenv(dotenv_path=self.dotenv_path, override=True)

    @property
    def api_key(self) -> str:
        return os.getenv(self.env_var, "")


def ensure_authorized(selector: Optional[KeySelector] = None) -> bool:
    """
    Make sure an API key is selected, prompting the selection flow once

    A runtime without a selector is treated as already authorized.
    """
    if selector is None:
        return True
    if selector.has_selected_api_key():
        return True
    console.print("[yellow]🔑 No API key selected, opening key selection[/yellow]")
    selector.open_select_key()
    return selector.has_selected_api_key()


def is_authorization_error(error: BaseException) -> bool:
    """Structured status code first, then the known failure phrase"""
    if isinstance(error, AuthorizationError):
        return True
    if isinstance(error, genai_errors.APIError) and error.code in AUTH_FAILURE_CODES:
        return True
    cause = getattr(error, "cause", None)
    if cause is not None and cause is not error and is_authorization_error(cause):
        return True
    return AUTH_FAILURE_PHRASE in str(error)
