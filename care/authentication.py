"""
Token authentication for the CareGuardian API.

Clients send ``Authorization: Token <key>``; the key is issued by the
register and login endpoints and removed on logout.  Keeping the class
in its own module lets the REST framework settings import it without
pulling in any views.
"""
from __future__ import annotations

from rest_framework import authentication


class TokenAuthentication(authentication.TokenAuthentication):
    """Token authentication using the ``Token`` keyword.

    ``authenticate_header`` is inherited, so anonymous requests receive
    401 with a ``WWW-Authenticate`` header instead of 403.
    """

    keyword = 'Token'
