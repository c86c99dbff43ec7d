"""
Basic authentication for the Nexus REST API.

Credentials are looked up in the environment every time a request is about
to be sent. Nothing is cached, so a rotated token is picked up by the next
request without restarting the client.
"""

# Standard library imports
import logging
import os
from typing import Mapping, Optional

# Third-party imports
import httpx
from pydantic import ConfigDict, SecretStr

# Local imports
from ..exceptions import MissingCredentials
from ..models.base import NexusBaseModel
from ..utils.constants import IDENTITY_ENV, SECRET_ENV


class Credentials(NexusBaseModel):
    """Identity and secret for HTTP Basic authentication."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    identity: str
    secret: SecretStr

    def as_basic_auth(self) -> httpx.BasicAuth:
        """Build the httpx auth object for a single request."""
        return httpx.BasicAuth(self.identity, self.secret.get_secret_value())


class CredentialResolver:
    """
    Reads the basic auth identity and secret from the environment.

    An absent or empty variable is a hard failure: the request it was resolved
    for is never sent with blank credentials.
    """

    def __init__(
        self,
        identity_env: str = IDENTITY_ENV,
        secret_env: str = SECRET_ENV,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            identity_env: Name of the variable holding the identity
            secret_env: Name of the variable holding the secret
            environ: Mapping to read from instead of os.environ
        """
        self.identity_env = identity_env
        self.secret_env = secret_env
        self._environ = environ

    def resolve(self) -> Credentials:
        """
        Look up both credential values.

        Returns:
            Credentials for the next request

        Raises:
            MissingCredentials: If either variable is absent or empty
        """
        environ = self._environ if self._environ is not None else os.environ
        identity = environ.get(self.identity_env)
        secret = environ.get(self.secret_env)

        missing = [name for name, value in ((self.identity_env, identity), (self.secret_env, secret)) if not value]
        if missing:
            raise MissingCredentials(missing)

        logging.debug("Resolved Nexus credentials for identity %s", identity)
        return Credentials(identity=identity, secret=secret)


__all__ = ["Credentials", "CredentialResolver"]
