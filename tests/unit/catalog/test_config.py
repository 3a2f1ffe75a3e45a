'''Test provider configuration'''
import pytest

from catalog.config import DEFAULT_NAMESPACE, DEFAULT_TIMEOUT, ProviderConfig, ProviderConfigError
from catalog.util.jwt import JwtAuth, TokenAuth


def test_from_env():
    config = ProviderConfig.from_env({
        'BACKSTAGE_BASE_URL': 'https://backstage.example.com/',
        'BACKSTAGE_TOKEN': 'secret',
        'BACKSTAGE_DEFAULT_NAMESPACE': 'example-namespace',
        'BACKSTAGE_TIMEOUT': '2.5',
    })

    assert config.base_url == 'https://backstage.example.com'
    assert config.token == 'secret'
    assert config.default_namespace == 'example-namespace'
    assert config.timeout == 2.5


def test_from_env_defaults():
    config = ProviderConfig.from_env({})

    assert config.base_url == 'MUST_SET_BACKSTAGE_BASE_URL'
    assert config.token is None
    assert config.default_namespace == DEFAULT_NAMESPACE
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.auth() is None


@pytest.mark.parametrize('timeout', ['soon', '0', '-1'])
def test_from_env_invalid_timeout(timeout: str):
    with pytest.raises(ProviderConfigError):
        ProviderConfig.from_env({'BACKSTAGE_TIMEOUT': timeout})


def test_auth_prefers_token():
    config = ProviderConfig('https://backstage.example.com', token='secret', client_id='id', client_secret='s')

    assert isinstance(config.auth(), TokenAuth)
    assert not isinstance(config.auth(), JwtAuth)


def test_auth_client_credentials():
    config = ProviderConfig.from_env({
        'CLIENT_ID': 'clientId',
        'CLIENT_SECRET': 'clientSecret',
        'AUTH_ENDPOINT': 'https://auth.example.com/oauth2/token',
    })
    auth = config.auth()

    assert isinstance(auth, JwtAuth)
    assert auth.auth_endpoint == 'https://auth.example.com/oauth2/token'
