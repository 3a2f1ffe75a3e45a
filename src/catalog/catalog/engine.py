'''Data source read

A read fetches one entity and decides which source becomes the state:

* fetch succeeded: the state is projected from the fetched entity and any
  fallback is ignored.
* fetch failed, no fallback: an error diagnostic is reported and no state
  is produced.
* fetch failed, fallback set: a warning is reported and the fallback
  becomes the state, with unset ``id``, ``api_version`` and ``kind``
  filled with placeholder values.

The two sources are never merged attribute by attribute.
'''
import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from aws_lambda_powertools.logging import Logger

from catalog.config import DEFAULT_NAMESPACE
from catalog.diagnostics import Diagnostics
from catalog.fetch import EntityGetter, FetchResult, fetch_entity
from catalog.model.entity import DEFAULT_API_VERSION
from catalog.model.kinds import KindDescriptor
from catalog.model.state import EntityState
from catalog.projector import complete_spec, project_entity
from catalog.schema import validate_request

LOGGER = Logger(utc=True)

FALLBACK_ID = '123456789'
FALLBACK_API_VERSION = DEFAULT_API_VERSION


@dataclass
class ReadRequest:
    name: str
    namespace: Optional[str] = None
    fallback: Optional[EntityState] = None

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'ReadRequest':
        fallback = config.get('fallback')
        return cls(
            name=config['name'],
            namespace=config.get('namespace'),
            fallback=EntityState.from_dict(fallback, infer_missing=True) if fallback is not None else None  # type: ignore[attr-defined]
        )


@dataclass
class ReadResponse:
    state: Optional[EntityState] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'state': self.state.to_dict() if self.state is not None else None,  # type: ignore[attr-defined]
            'diagnostics': self.diagnostics.to_list(),
        }


def fallback_state(descriptor: KindDescriptor, fallback: EntityState) -> EntityState:
    '''Return the fallback as state, placeholders filled in for unset identity'''
    state = copy.deepcopy(fallback)
    if state.id is None:
        state.id = FALLBACK_ID
    if state.api_version is None:
        state.api_version = FALLBACK_API_VERSION
    if state.kind is None:
        state.kind = descriptor.kind
    state.spec = complete_spec(descriptor, state.spec)
    return state


def _report_fetch_failure(
    descriptor: KindDescriptor,
    request: ReadRequest,
    namespace: str,
    result: FetchResult,
    diagnostics: Diagnostics
) -> None:
    summary = 'Error reading Backstage {} kind'.format(descriptor.kind)
    detail = 'Could not read Backstage {} kind {}/{}: {}'.format(
        descriptor.kind,
        namespace,
        request.name,
        result.cause
    )
    if request.fallback is None:
        LOGGER.error(detail, extra={'status': result.status})
        diagnostics.add_error(summary, detail)
    else:
        LOGGER.warning('{}; using fallback'.format(detail), extra={'status': result.status})
        diagnostics.add_warning(summary, detail)


def read_entity(
    descriptor: KindDescriptor,
    config: Mapping[str, Any],
    client: EntityGetter
) -> ReadResponse:
    '''Read one entity of the given kind'''
    response = ReadResponse()
    response.diagnostics.extend(validate_request(descriptor, config))
    if response.diagnostics.has_error():
        return response

    request = ReadRequest.from_config(config)
    namespace = request.namespace or client.default_namespace or DEFAULT_NAMESPACE

    LOGGER.debug('Getting {} kind {}/{} from Backstage API'.format(descriptor.kind, request.name, namespace))
    result = fetch_entity(client, descriptor, request.name, namespace)

    if result.ok and result.entity is not None:
        response.state = project_entity(descriptor, result.entity, request.name, namespace)
        return response

    _report_fetch_failure(descriptor, request, namespace, result, response.diagnostics)
    if request.fallback is None:
        return response

    response.state = fallback_state(descriptor, request.fallback)
    return response
