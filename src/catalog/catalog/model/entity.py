'''Backstage Catalog entity as returned by the catalog API'''
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from dataclasses_json import LetterCase, Undefined, dataclass_json

DEFAULT_API_VERSION = 'backstage.io/v1alpha1'


@dataclass_json(letter_case=LetterCase.CAMEL, undefined=Undefined.EXCLUDE)
@dataclass
class EntityLink:
    url: str = ''
    title: Optional[str] = None
    icon: Optional[str] = None
    type: Optional[str] = None


@dataclass_json(letter_case=LetterCase.CAMEL, undefined=Undefined.EXCLUDE)
@dataclass
class EntityRelationTarget:
    kind: str = ''
    namespace: str = ''
    name: str = ''


@dataclass_json(letter_case=LetterCase.CAMEL, undefined=Undefined.EXCLUDE)
@dataclass
class EntityRelation:
    type: str = ''
    target_ref: str = ''
    target: EntityRelationTarget = field(default_factory=EntityRelationTarget)


@dataclass_json(letter_case=LetterCase.CAMEL, undefined=Undefined.EXCLUDE)
@dataclass
class EntityMetadata:
    name: str = ''
    namespace: Optional[str] = None
    uid: Optional[str] = None
    etag: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None
    tags: Optional[List[str]] = None
    links: Optional[List[EntityLink]] = None


@dataclass_json(letter_case=LetterCase.CAMEL, undefined=Undefined.EXCLUDE)
@dataclass
class Entity:
    '''Catalog entity of any kind.

    ``spec`` stays a raw mapping; its keys are read through the kind's
    spec field table.
    '''
    api_version: str = DEFAULT_API_VERSION
    kind: str = ''
    metadata: EntityMetadata = field(default_factory=EntityMetadata)
    spec: Dict[str, Any] = field(default_factory=dict)
    relations: List[EntityRelation] = field(default_factory=list)
