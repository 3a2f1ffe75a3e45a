'''Fetch one entity from the catalog'''
from dataclasses import dataclass
from typing import Optional, Protocol

import requests

from catalog.client import GetResult
from catalog.model.entity import Entity
from catalog.model.kinds import KindDescriptor
from catalog.projector import SpecDecodeError, check_spec


class EntityGetter(Protocol):
    default_namespace: str

    def get(self, kind: str, name: str, namespace: Optional[str] = None) -> GetResult: ...


@dataclass
class FetchResult:
    entity: Optional[Entity] = None
    status: Optional[int] = None
    reason: str = ''
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        '''True only for a 200 with no error; an error wins over the status'''
        return self.error is None and self.status == requests.codes.ok

    @property
    def cause(self) -> str:
        '''Why the fetch failed, as reported to the user'''
        if self.error is not None:
            return str(self.error)
        return '{} {}'.format(self.status, self.reason).strip()


def fetch_entity(
    client: EntityGetter,
    descriptor: KindDescriptor,
    name: str,
    namespace: str
) -> FetchResult:
    '''Call the catalog once for the entity'''
    entity, response, error = client.get(descriptor.path, name, namespace)
    if entity is not None and error is None:
        try:
            check_spec(descriptor, entity.spec)
        except SpecDecodeError as e:
            entity, error = None, e

    if response is None:
        return FetchResult(entity, None, '', error)

    return FetchResult(entity, response.status_code, response.reason or '', error)
