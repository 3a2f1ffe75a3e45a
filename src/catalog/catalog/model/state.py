'''Data source attribute tree

The same shape serves as the output state of a read and as the
user-supplied fallback. Unset attributes are ``None`` and encode as null.
'''
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from dataclasses_json import Undefined, dataclass_json


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class LinkState:
    url: Optional[str] = None
    title: Optional[str] = None
    icon: Optional[str] = None
    type: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class RelationTargetState:
    name: Optional[str] = None
    kind: Optional[str] = None
    namespace: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class RelationState:
    type: Optional[str] = None
    target_ref: Optional[str] = None
    target: Optional[RelationTargetState] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class MetadataState:
    uid: Optional[str] = None
    etag: Optional[str] = None
    name: Optional[str] = None
    namespace: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None
    tags: Optional[List[str]] = None
    links: Optional[List[LinkState]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class EntityState:
    '''Entity as exposed to Terraform'''
    id: Optional[str] = None
    name: Optional[str] = None
    namespace: Optional[str] = None
    api_version: Optional[str] = None
    kind: Optional[str] = None
    metadata: Optional[MetadataState] = None
    relations: Optional[List[RelationState]] = None
    spec: Optional[Dict[str, Any]] = None
