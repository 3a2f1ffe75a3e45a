'''Read a Backstage Catalog entity as a data source'''
from typing import Any, Dict

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from aws_lambda_powertools.utilities.data_classes import (
    event_source,
)

from catalog.client import CatalogClient
from catalog.config import ProviderConfig
from catalog.diagnostics import Diagnostics
from catalog.engine import ReadResponse, read_entity
from catalog.model.events import ReadEntityEvent
from catalog.model.kinds import get_kind

LOGGER = Logger(utc=True)

CONFIG = ProviderConfig.from_env()
CLIENT = CatalogClient.from_config(CONFIG)


class ReadEntityError(Exception):
    '''Read Entity Error'''
    def __init__(self, type_name: str, diagnostics: Diagnostics) -> None:
        super().__init__('Failed to read {}: {}'.format(
            type_name,
            '; '.join(d.detail or d.summary for d in diagnostics.errors)
        ))


def _read_entity(event: ReadEntityEvent, client: CatalogClient) -> ReadResponse:
    '''Read the entity described by the event'''
    descriptor = get_kind(event.kind)
    response = read_entity(descriptor, event.config, client)

    if response.diagnostics.has_error():
        LOGGER.error('Failed to read entity', extra={'diagnostics': response.diagnostics.to_list()})
        raise ReadEntityError(descriptor.type_name, response.diagnostics)

    for warning in response.diagnostics.warnings:
        LOGGER.warning(warning.summary, extra={'detail': warning.detail})

    return response


def _main(event: ReadEntityEvent) -> Dict[str, Any]:
    '''Return the data source state for the event.'''
    return _read_entity(event, CLIENT).to_dict()


@LOGGER.inject_lambda_context
@event_source(data_class=ReadEntityEvent)
def handler(event: ReadEntityEvent, _: LambdaContext) -> Dict[str, Any]:
    '''Event handler'''
    LOGGER.debug('Event', extra={"message_object": event.raw_event})

    return _main(event)
