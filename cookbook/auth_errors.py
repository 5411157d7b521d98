"""Friendly wording for Firebase Auth error codes."""

AUTH_ERROR_MESSAGES = {
    "EMAIL_EXISTS": "This email address is already registered.",
    "INVALID_LOGIN_CREDENTIALS": "The email or password is incorrect.",
    "EMAIL_NOT_FOUND": "The email or password is incorrect.",
    "INVALID_PASSWORD": "The email or password is incorrect.",
    "USER_DISABLED": "This account has been disabled.",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "Too many attempts. Please wait a moment and try again.",
}


def friendly_auth_message(code):
    """Return the friendly message for a Firebase error code.

    Firebase sometimes appends detail ("TOO_MANY_ATTEMPTS_TRY_LATER : ...") so
    known codes are matched as substrings. Unknown codes are returned as-is.
    """
    text = (code or "").strip()
    for known, message in AUTH_ERROR_MESSAGES.items():
        if known in text:
            return message
    return text


def error_code_from_response(response):
    """Extract error.message from a Firebase REST error body, or ''."""
    try:
        body = response.json()
    except ValueError:
        return ""
    if not isinstance(body, dict):
        return ""
    error = body.get("error") or {}
    if not isinstance(error, dict):
        return ""
    return error.get("message") or ""
