'''Project a fetched catalog entity onto the data source attribute tree'''
from typing import Any, Dict, Iterable, Mapping, Optional

from catalog.model.entity import Entity
from catalog.model.kinds import KindDescriptor, SpecField
from catalog.model.state import (
    EntityState,
    LinkState,
    MetadataState,
    RelationState,
    RelationTargetState,
)


class SpecDecodeError(Exception):
    '''Spec Decode Error'''
    def __init__(self, path, expected, value) -> None:
        super().__init__('Invalid {}: expected {}, got {}'.format(path, expected, type(value).__name__))


def _check_spec_fields(spec_fields: Iterable[SpecField], spec: Any, path: str = 'spec') -> None:
    if spec is None:
        return
    if not isinstance(spec, Mapping):
        raise SpecDecodeError(path, 'object', spec)
    for f in spec_fields:
        value = spec.get(f.key)
        if value is None:
            continue
        if f.type == 'object':
            _check_spec_fields(f.attributes, value, '{}.{}'.format(path, f.key))
        elif f.type == 'list' and not isinstance(value, list):
            raise SpecDecodeError('{}.{}'.format(path, f.key), 'list', value)


def check_spec(descriptor: KindDescriptor, spec: Any) -> None:
    '''Raise SpecDecodeError when a catalog spec value does not fit the kind's table'''
    _check_spec_fields(descriptor.spec_fields, spec)


def _project_spec_fields(spec_fields: Iterable[SpecField], spec: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    spec = spec or {}
    projected: Dict[str, Any] = {}
    for f in spec_fields:
        value = spec.get(f.key)
        if value is None:
            projected[f.name] = None
        elif f.type == 'object':
            projected[f.name] = _project_spec_fields(f.attributes, value)
        elif f.type == 'list':
            projected[f.name] = list(value)
        else:
            projected[f.name] = value
    return projected


def project_spec(descriptor: KindDescriptor, spec: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    '''Copy the kind's spec attributes out of the catalog spec'''
    return _project_spec_fields(descriptor.spec_fields, spec)


def project_metadata(entity: Entity) -> MetadataState:
    source = entity.metadata
    metadata = MetadataState(
        uid=source.uid,
        etag=source.etag,
        name=source.name,
        namespace=source.namespace,
        title=source.title,
        description=source.description,
        labels={},
        annotations={},
    )
    # Labels and annotations are always present; tags and links stay unset when empty.
    for k, v in (source.labels or {}).items():
        metadata.labels[k] = v  # type: ignore[index]
    for k, v in (source.annotations or {}).items():
        metadata.annotations[k] = v  # type: ignore[index]

    if source.tags:
        metadata.tags = list(source.tags)
    if source.links:
        metadata.links = [
            LinkState(url=l.url, title=l.title, icon=l.icon, type=l.type) for l in source.links
        ]
    return metadata


def project_entity(
    descriptor: KindDescriptor,
    entity: Entity,
    name: Optional[str],
    namespace: Optional[str]
) -> EntityState:
    '''Build the output state from a successfully fetched entity'''
    relations = None
    if entity.relations:
        relations = [
            RelationState(
                type=r.type,
                target_ref=r.target_ref,
                target=RelationTargetState(
                    name=r.target.name,
                    kind=r.target.kind,
                    namespace=r.target.namespace
                )
            ) for r in entity.relations
        ]

    return EntityState(
        id=entity.metadata.uid,
        name=name,
        namespace=namespace,
        api_version=entity.api_version,
        kind=entity.kind,
        metadata=project_metadata(entity),
        relations=relations,
        spec=project_spec(descriptor, entity.spec),
    )


def _complete_spec_fields(spec_fields: Iterable[SpecField], spec: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    spec = spec or {}
    completed: Dict[str, Any] = {}
    for f in spec_fields:
        value = spec.get(f.name)
        if f.type == 'object' and isinstance(value, Mapping):
            value = _complete_spec_fields(f.attributes, value)
        completed[f.name] = value
    return completed


def complete_spec(descriptor: KindDescriptor, spec: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    '''Return a user-written spec with every attribute of the kind present, unset ones None'''
    if spec is None:
        return None
    return _complete_spec_fields(descriptor.spec_fields, spec)
