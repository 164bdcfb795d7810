"""
Unit tests: key selection and authorization-failure detection
"""
import os
import sys
import unittest
from unittest.mock import patch

from google.genai import errors as genai_errors

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from philotrans.auth import EnvKeySelector, ensure_authorized, is_authorization_error
from philotrans.errors import AuthorizationError, UpstreamError


class FakeSelector:
    def __init__(self, selected=False, selects_on_open=False):
        self.selected = selected
        self.selects_on_open = selects_on_open
        self.opened = 0

    def has_selected_api_key(self):
        return self.selected

    def open_select_key(self):
        self.opened += 1
        if self.selects_on_open:
            self.selected = True


class TestEnsureAuthorized(unittest.TestCase):

    def test_no_selector_means_authorized(self):
        self.assertTrue(ensure_authorized(None))

    def test_already_selected(self):
        selector = FakeSelector(selected=True)
        self.assertTrue(ensure_authorized(selector))
        self.assertEqual(selector.opened, 0)

    def test_prompts_once_then_rechecks(self):
        selector = FakeSelector(selects_on_open=True)
        self.assertTrue(ensure_authorized(selector))
        self.assertEqual(selector.opened, 1)

    def test_still_unauthorized_after_prompt(self):
        selector = FakeSelector()
        self.assertFalse(ensure_authorized(selector))
        self.assertEqual(selector.opened, 1)

    def test_idempotent(self):
        selector = FakeSelector(selects_on_open=True)
        self.assertTrue(ensure_authorized(selector))
        self.assertTrue(ensure_authorized(selector))
        self.assertEqual(selector.opened, 1)


class TestEnvKeySelector(unittest.TestCase):

    def test_reads_environment(self):
        with patch.dict(os.environ, {"PHILO_TEST_KEY": "abc"}):
            selector = EnvKeySelector(env_var="PHILO_TEST_KEY")
            self.assertTrue(selector.has_selected_api_key())
            self.assertEqual(selector.api_key, "abc")

    def test_missing_key(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("PHILO_TEST_KEY", None)
            selector = EnvKeySelector(env_var="PHILO_TEST_KEY")
            self.assertFalse(selector.has_selected_api_key())

    def test_open_reloads_dotenv(self):
        with patch("philotrans.auth.load_dotenv") as load:
            EnvKeySelector(dotenv_path="/tmp/.env").open_select_key()
        load.assert_called_once_with(dotenv_path="/tmp/.env", override=True)


class TestIsAuthorizationError(unittest.TestCase):

    def test_known_phrase(self):
        self.assertTrue(is_authorization_error(Exception("404 Requested entity was not found.")))

    def test_phrase_inside_wrapped_cause(self):
        cause = Exception("Requested entity was not found.")
        self.assertTrue(is_authorization_error(UpstreamError("call failed", cause)))

    def test_structured_code(self):
        error = genai_errors.APIError(403, {"error": {"code": 403, "message": "denied", "status": "PERMISSION_DENIED"}})
        self.assertTrue(is_authorization_error(error))

    def test_authorization_error_class(self):
        self.assertTrue(is_authorization_error(AuthorizationError("No API key selected")))
        self.assertTrue(is_authorization_error(UpstreamError("call failed", AuthorizationError("denied"))))

    def test_other_failures(self):
        self.assertFalse(is_authorization_error(Exception("quota exceeded")))
        self.assertFalse(is_authorization_error(UpstreamError("timeout")))


if __name__ == '__main__':
    unittest.main()
