'''Backstage Catalog API client'''
from typing import Optional, Tuple

import requests
from requests.auth import AuthBase

from aws_lambda_powertools.logging import Logger

from catalog.config import DEFAULT_NAMESPACE, DEFAULT_TIMEOUT, ProviderConfig
from catalog.model.entity import Entity
from catalog.util.jwt import JwtRequestException

LOGGER = Logger(utc=True)

ENTITIES_BY_NAME_PATH = 'api/catalog/entities/by-name'

GetResult = Tuple[Optional[Entity], Optional[requests.Response], Optional[Exception]]


class CatalogDecodeError(Exception):
    '''Catalog Decode Error'''
    def __init__(self, url, cause) -> None:
        super().__init__('Failed to decode entity from {}: {}'.format(url, cause))


class CatalogClient:
    '''Read-only client for the catalog entities API'''
    def __init__(
        self,
        base_url: str,
        auth: Optional[AuthBase] = None,
        default_namespace: str = DEFAULT_NAMESPACE,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.auth = auth
        self.default_namespace = default_namespace
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: ProviderConfig) -> 'CatalogClient':
        return cls(
            config.base_url,
            auth=config.auth(),
            default_namespace=config.default_namespace,
            timeout=config.timeout
        )

    def entity_url(self, kind: str, name: str, namespace: str) -> str:
        return '/'.join([
            self.base_url,
            ENTITIES_BY_NAME_PATH,
            kind.lower(),
            namespace,
            name
        ])

    def get(self, kind: str, name: str, namespace: Optional[str] = None) -> GetResult:
        '''Get an entity by kind, name and namespace.

        Returns ``(entity, response, error)``. Network failures come back as
        ``error`` with no response; a non-200 response comes back without an
        entity or error. Nothing is raised for either.
        '''
        url = self.entity_url(kind, name, namespace or self.default_namespace)
        try:
            r = self.session.get(
                url,
                headers={'Accept': 'application/json'},
                auth=self.auth,
                timeout=self.timeout
            )
        except (requests.RequestException, JwtRequestException) as e:
            LOGGER.warning('Catalog request failed', extra={'url': url, 'error': str(e)})
            return None, None, e

        if r.status_code != requests.codes.ok:
            LOGGER.debug('Catalog returned non-OK status', extra={'url': url, 'status_code': r.status_code})
            return None, r, None

        try:
            entity = Entity.from_dict(r.json(), infer_missing=True)  # type: ignore[attr-defined]
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            return None, r, CatalogDecodeError(url, e)

        return entity, r, None
