'''Provider configuration'''
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from requests.auth import AuthBase

from catalog.util.jwt import JwtAuth, TokenAuth

DEFAULT_NAMESPACE = 'default'
DEFAULT_TIMEOUT = 10.0


class ProviderConfigError(Exception):
    '''Provider Configuration Error'''
    def __init__(self, setting, value) -> None:
        super().__init__('Invalid provider setting {}: {}'.format(setting, value))


@dataclass(frozen=True)
class ProviderConfig:
    '''Settings shared by every data source read'''
    base_url: str
    token: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    auth_endpoint: Optional[str] = None
    default_namespace: str = DEFAULT_NAMESPACE
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ProviderConfig':
        '''Load settings from the environment'''
        env = os.environ if environ is None else environ

        timeout = env.get('BACKSTAGE_TIMEOUT', str(DEFAULT_TIMEOUT))
        try:
            timeout_seconds = float(timeout)
        except ValueError:
            raise ProviderConfigError('BACKSTAGE_TIMEOUT', timeout)
        if timeout_seconds <= 0:
            raise ProviderConfigError('BACKSTAGE_TIMEOUT', timeout)

        return cls(
            base_url=env.get('BACKSTAGE_BASE_URL', 'MUST_SET_BACKSTAGE_BASE_URL').rstrip('/'),
            token=env.get('BACKSTAGE_TOKEN') or None,
            client_id=env.get('CLIENT_ID') or None,
            client_secret=env.get('CLIENT_SECRET') or None,
            auth_endpoint=env.get('AUTH_ENDPOINT', 'MUST_SET_AUTH_ENDPOINT'),
            default_namespace=env.get('BACKSTAGE_DEFAULT_NAMESPACE') or DEFAULT_NAMESPACE,
            timeout=timeout_seconds,
        )

    def auth(self) -> Optional[AuthBase]:
        '''Return request authentication, None for anonymous access'''
        if self.token:
            return TokenAuth(self.token)
        if self.client_id and self.client_secret:
            return JwtAuth(self.client_id, self.client_secret, self.auth_endpoint or '')
        return None
