"""
Registry credentials sent in the ``X-Registry-Config`` header.
"""

from docker_engine_api.models.base import DockerModel


class BasicAuth(DockerModel):
    """Username/password login for a registry."""

    username: str
    password: str
    email: str | None = None
    serveraddress: str | None = None


class TokenAuth(DockerModel):
    """Identity token obtained from a previous registry login."""

    identitytoken: str


class RegistryCredentials(DockerModel):
    """Credentials for one registry inside a build's registry config map."""

    username: str
    password: str


# Build registry config: registry hostname -> credentials
RegistryConfig = dict[str, RegistryCredentials | dict[str, str]]

AuthConfig = BasicAuth | TokenAuth
