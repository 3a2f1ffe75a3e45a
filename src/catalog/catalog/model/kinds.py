'''Entity kinds served as data sources

Each kind is described by a static table: its literal tag, the data
source type name and the ordered list of ``spec`` attributes. The read
engine and the request schema are both driven from this table.
'''
from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

DOCS_URL = 'https://backstage.io/docs/features/software-catalog/descriptor-format'
TYPE_NAME_PREFIX = 'backstage'

KIND_API = 'API'
KIND_COMPONENT = 'Component'
KIND_DOMAIN = 'Domain'
KIND_GROUP = 'Group'
KIND_LOCATION = 'Location'
KIND_RESOURCE = 'Resource'
KIND_SYSTEM = 'System'
KIND_USER = 'User'


class UnknownEntityKindError(Exception):
    '''Unknown Entity Kind Error'''
    def __init__(self, kind) -> None:
        super().__init__('Unknown Backstage entity kind: {}'.format(kind))


@dataclass(frozen=True)
class SpecField:
    '''A ``spec`` attribute and where it lives in the catalog response'''
    name: str
    key: str
    type: Literal['string', 'list', 'object'] = 'string'
    description: str = ''
    attributes: Tuple['SpecField', ...] = ()


@dataclass(frozen=True)
class KindDescriptor:
    kind: str
    spec_fields: Tuple[SpecField, ...]
    anchor: str = ''

    @property
    def type_name(self) -> str:
        '''Data source type name, e.g. ``backstage_api``'''
        return '{}_{}'.format(TYPE_NAME_PREFIX, self.kind.lower())

    @property
    def path(self) -> str:
        '''Kind segment of the catalog by-name path'''
        return self.kind.lower()

    @property
    def description(self) -> str:
        return (
            'Use this data source to get a specific [{} entity]({}#{}) '
            'from Backstage Software Catalog.'.format(self.kind, DOCS_URL, self.anchor)
        )

    @property
    def fallback_description(self) -> str:
        return (
            'A complete replica of the `{}` as it would exist in backstage. Set this to '
            'provide a fallback in case the Backstage instance is not functioning, is down, '
            'or is unrealiable.'.format(self.kind)
        )


PROFILE = SpecField(
    'profile', 'profile', 'object',
    'Optional profile information about the entity, mainly for display purposes.',
    (
        SpecField('display_name', 'displayName', description='A simple display name.'),
        SpecField('email', 'email', description='An email where this entity can be reached.'),
        SpecField('picture', 'picture', description='The URL of an image that represents this entity.'),
    )
)

KINDS: Dict[str, KindDescriptor] = {
    d.kind.lower(): d for d in (
        KindDescriptor(KIND_API, (
            SpecField('type', 'type', description='Type of the API definition.'),
            SpecField('lifecycle', 'lifecycle', description='Lifecycle state of the API.'),
            SpecField('owner', 'owner', description='An entity reference to the owner of the API'),
            SpecField('definition', 'definition',
                      description='Definition of the API, based on the format defined by the type.'),
            SpecField('system', 'system',
                      description='An entity reference to the system that the API belongs to.'),
        ), anchor='kind-api'),
        KindDescriptor(KIND_COMPONENT, (
            SpecField('type', 'type', description='The type of component.'),
            SpecField('lifecycle', 'lifecycle', description='The lifecycle state of the component.'),
            SpecField('owner', 'owner', description='An entity reference to the owner of the component.'),
            SpecField('subcomponent_of', 'subcomponentOf',
                      description='An entity reference to another component of which the component is a part.'),
            SpecField('provides_apis', 'providesApis', 'list',
                      'An array of entity references to the APIs that are provided by the component.'),
            SpecField('consumes_apis', 'consumesApis', 'list',
                      'An array of entity references to the APIs that are consumed by the component.'),
            SpecField('depends_on', 'dependsOn', 'list',
                      'An array of references to other entities that the component depends on to function.'),
            SpecField('system', 'system',
                      description='An entity reference to the system that the component belongs to.'),
        ), anchor='kind-component'),
        KindDescriptor(KIND_DOMAIN, (
            SpecField('owner', 'owner', description='An entity reference to the owner of the domain.'),
        ), anchor='kind-domain'),
        KindDescriptor(KIND_GROUP, (
            SpecField('type', 'type', description='The type of group.'),
            PROFILE,
            SpecField('parent', 'parent',
                      description='The immediate parent group in the hierarchy, if any.'),
            SpecField('children', 'children', 'list',
                      'The immediate child groups of this group in the hierarchy.'),
            SpecField('members', 'members', 'list',
                      'The users that are members of this group.'),
        ), anchor='kind-group'),
        KindDescriptor(KIND_LOCATION, (
            SpecField('type', 'type', description='The single location type.'),
            SpecField('target', 'target', description='A single target as a string.'),
            SpecField('targets', 'targets', 'list', 'A list of targets as strings.'),
            SpecField('presence', 'presence',
                      description='Whether the presence of the location target is required.'),
        ), anchor='kind-location'),
        KindDescriptor(KIND_RESOURCE, (
            SpecField('type', 'type', description='The type of resource.'),
            SpecField('owner', 'owner', description='An entity reference to the owner of the resource.'),
            SpecField('depends_on', 'dependsOn', 'list',
                      'An array of references to other entities that the resource depends on to function.'),
            SpecField('system', 'system',
                      description='An entity reference to the system that the resource belongs to.'),
        ), anchor='kind-resource'),
        KindDescriptor(KIND_SYSTEM, (
            SpecField('owner', 'owner', description='An entity reference to the owner of the system.'),
            SpecField('domain', 'domain',
                      description='An entity reference to the domain that the system belongs to.'),
        ), anchor='kind-system'),
        KindDescriptor(KIND_USER, (
            PROFILE,
            SpecField('member_of', 'memberOf', 'list',
                      'The list of groups that the user is a direct member of.'),
        ), anchor='kind-user'),
    )
}


def get_kind(value: Optional[str]) -> KindDescriptor:
    '''Return the descriptor for a kind literal or data source type name'''
    key = (value or '').lower()
    prefix = '{}_'.format(TYPE_NAME_PREFIX)
    if key.startswith(prefix):
        key = key[len(prefix):]

    try:
        return KINDS[key]
    except KeyError:
        raise UnknownEntityKindError(value)
