'''Catalog API authentication'''
from requests import post
from requests.auth import AuthBase
from time import time

from aws_lambda_powertools.logging import Logger
LOGGER = Logger(utc=True)

# Seconds before expiry at which a token is refreshed
EXPIRATION_GRACE_PERIOD = 120

class JwtRequestException(Exception):
    '''JWT Request Exception'''
    def __init__(self, reason=None):
        super().__init__('Failed to request JWT token: {}'.format(reason))


class TokenAuth(AuthBase):
    '''Static bearer token authentication'''
    def __init__(self, token: str):
        self.token = token

    def __call__(self, r):
        r.headers['Authorization'] = 'Bearer {}'.format(self.token)
        return r


class JwtAuth(TokenAuth):
    '''OAuth2 client credentials JWT authentication'''
    def __init__(self, client_id: str, client_secret: str, auth_endpoint: str):
        super().__init__('')
        self.client_id = client_id
        self.client_secret = client_secret
        self.auth_endpoint = auth_endpoint
        self.expiration = None

    def __call__(self, r):
        self._validate()
        return super().__call__(r)

    def _fetch_jwt(self) -> None:
        LOGGER.info('Fetching JWT token', extra={'auth_endpoint': self.auth_endpoint})
        response = post(
            self.auth_endpoint,
            data={
                'grant_type': 'client_credentials',
                'client_id': self.client_id,
                'client_secret': self.client_secret
            },
            timeout=10
        )

        if not response.ok:
            raise JwtRequestException(response.status_code)

        try:
            body = response.json()
            token = body['access_token']
            expires_in = int(body.get('expires_in') or 0)
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            raise JwtRequestException('invalid token response ({})'.format(e))

        self.token = token
        # Current time + expiration seconds - grace period
        self.expiration = int(time()) + expires_in - EXPIRATION_GRACE_PERIOD

    def _validate(self) -> None:
        now = int(time())
        if (not self.expiration) or (now > self.expiration):
            LOGGER.info('JWT token expired', extra={'expiration': self.expiration, 'now': now})
            self._fetch_jwt()
