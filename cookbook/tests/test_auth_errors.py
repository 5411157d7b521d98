from unittest.mock import MagicMock

from django.test import SimpleTestCase

from cookbook.auth_errors import error_code_from_response, friendly_auth_message


class FriendlyAuthMessageTests(SimpleTestCase):
    def test_known_codes(self):
        self.assertEqual(friendly_auth_message("EMAIL_EXISTS"), "This email address is already registered.")
        self.assertEqual(friendly_auth_message("INVALID_PASSWORD"), "The email or password is incorrect.")

    def test_code_with_detail_suffix(self):
        message = friendly_auth_message("TOO_MANY_ATTEMPTS_TRY_LATER : Access disabled")
        self.assertTrue(message.startswith("Too many attempts"))

    def test_unknown_code_returned_as_is(self):
        self.assertEqual(friendly_auth_message(" SOMETHING_NEW "), "SOMETHING_NEW")
        self.assertEqual(friendly_auth_message(None), "")


class ErrorCodeFromResponseTests(SimpleTestCase):
    def _response(self, body=None, error=None):
        response = MagicMock()
        if error:
            response.json.side_effect = error
        else:
            response.json.return_value = body
        return response

    def test_reads_error_message(self):
        body = {"error": {"code": 400, "message": "EMAIL_NOT_FOUND"}}
        self.assertEqual(error_code_from_response(self._response(body)), "EMAIL_NOT_FOUND")

    def test_non_json_body(self):
        self.assertEqual(error_code_from_response(self._response(error=ValueError())), "")

    def test_unexpected_shapes(self):
        for body in ([], {"error": "oops"}, {}):
            self.assertEqual(error_code_from_response(self._response(body)), "")
