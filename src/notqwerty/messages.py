"""
Default user-facing text for rejection reasons.

Strings go through the ``notqwerty`` gettext domain, so an application can
ship translations. Callers that localize some other way pass their own
callable to ``strong_password`` instead.
"""

import gettext

_translation = gettext.translation('notqwerty', fallback=True)
_ = _translation.gettext

MESSAGES = {
    "too_short": "The password should be at least %(minimum)s characters long.",
    "weak_password": (
        "The password you have chosen is weak because it is easy to guess. "
        "Please choose another one."
    ),
}


def default_message(reason) -> str:
    """Render the message for a TooShort or WeakPassword reason."""
    return _(MESSAGES[reason.tag]) % vars(reason)
