'''Data source request schema and validation'''
from typing import Any, Dict, List, Mapping

from jsonschema import Draft7Validator

from catalog.diagnostics import Diagnostics
from catalog.model.kinds import KindDescriptor, SpecField

# Same restriction the catalog applies to entity names and namespaces.
PATTERN_ENTITY_NAME = r'^[a-zA-Z0-9]+([-_.][a-zA-Z0-9]+)*$'
ENTITY_NAME_MIN_LENGTH = 1
ENTITY_NAME_MAX_LENGTH = 63

DESCRIPTION_ID = 'A globally unique ID for the entity.'
DESCRIPTION_NAME = 'The name of the entity. Must be unique within the catalog at any given point in time, for any given namespace + kind pair.'
DESCRIPTION_NAMESPACE = 'The namespace that the entity belongs to.'
DESCRIPTION_API_VERSION = 'Version of specification format for this particular entity that this is written against.'
DESCRIPTION_KIND = 'The high level entity type being described.'
DESCRIPTION_METADATA = 'Metadata related to the entity.'
DESCRIPTION_RELATIONS = 'Relations that this entity has with other entities.'
DESCRIPTION_SPEC = 'The specification data describing the entity itself.'

INVALID_ATTRIBUTE_SUMMARY = 'Invalid Attribute Value'

ENTITY_NAME_SCHEMA: Dict[str, Any] = {
    'type': 'string',
    'minLength': ENTITY_NAME_MIN_LENGTH,
    'maxLength': ENTITY_NAME_MAX_LENGTH,
    'pattern': PATTERN_ENTITY_NAME,
}

_STRING = {'type': ['string', 'null']}
_STRING_LIST = {'type': ['array', 'null'], 'items': {'type': 'string'}}
_STRING_MAP = {'type': ['object', 'null'], 'additionalProperties': {'type': 'string'}}


def _optional(schema: Dict[str, Any]) -> Dict[str, Any]:
    types = schema['type'] if isinstance(schema['type'], list) else [schema['type']]
    return {**schema, 'type': types + ['null']}


def _object(properties: Dict[str, Any], **kwargs) -> Dict[str, Any]:
    return {
        'type': ['object', 'null'],
        'properties': properties,
        'additionalProperties': False,
        **kwargs
    }


METADATA_SCHEMA = _object({
    'uid': _STRING,
    'etag': _STRING,
    'name': _STRING,
    'namespace': _STRING,
    'title': _STRING,
    'description': _STRING,
    'labels': _STRING_MAP,
    'annotations': _STRING_MAP,
    'tags': _STRING_LIST,
    'links': {
        'type': ['array', 'null'],
        'items': _object({'url': _STRING, 'title': _STRING, 'icon': _STRING, 'type': _STRING}),
    },
}, description=DESCRIPTION_METADATA)

RELATIONS_SCHEMA = {
    'type': ['array', 'null'],
    'description': DESCRIPTION_RELATIONS,
    'items': _object({
        'type': _STRING,
        'target_ref': _STRING,
        'target': _object({'name': _STRING, 'kind': _STRING, 'namespace': _STRING}),
    }),
}


def _spec_field_schema(spec_field: SpecField) -> Dict[str, Any]:
    if spec_field.type == 'list':
        schema = dict(_STRING_LIST)
    elif spec_field.type == 'object':
        schema = _spec_schema(spec_field.attributes)
    else:
        schema = dict(_STRING)
    schema['description'] = spec_field.description
    return schema


def _spec_schema(spec_fields) -> Dict[str, Any]:
    return _object({f.name: _spec_field_schema(f) for f in spec_fields})


def request_schema(descriptor: KindDescriptor) -> Dict[str, Any]:
    '''Return the JSON schema of a read request for the given kind'''
    fallback = _object({
        'id': {**_STRING, 'description': DESCRIPTION_ID},
        'name': {**_optional(ENTITY_NAME_SCHEMA), 'description': DESCRIPTION_NAME},
        'namespace': {**_optional(ENTITY_NAME_SCHEMA), 'description': DESCRIPTION_NAMESPACE},
        'api_version': {**_STRING, 'description': DESCRIPTION_API_VERSION},
        'kind': {**_STRING, 'description': DESCRIPTION_KIND},
        'metadata': METADATA_SCHEMA,
        'relations': RELATIONS_SCHEMA,
        'spec': {**_spec_schema(descriptor.spec_fields), 'description': DESCRIPTION_SPEC},
    }, description=descriptor.fallback_description)

    return {
        '$schema': 'http://json-schema.org/draft-07/schema#',
        'title': descriptor.type_name,
        'description': descriptor.description,
        'type': 'object',
        'properties': {
            'name': {**ENTITY_NAME_SCHEMA, 'description': DESCRIPTION_NAME},
            'namespace': {**_optional(ENTITY_NAME_SCHEMA), 'description': DESCRIPTION_NAMESPACE},
            'fallback': fallback,
        },
        'required': ['name'],
        'additionalProperties': False,
    }


def _attribute_path(path) -> str:
    return '.'.join(str(p) for p in path) or '(root)'


def validate_name(value: Any) -> List[str]:
    '''Return the problems with an entity name or namespace, empty when valid'''
    validator = Draft7Validator(ENTITY_NAME_SCHEMA)
    return [e.message for e in validator.iter_errors(value)]


def validate_request(descriptor: KindDescriptor, config: Mapping[str, Any]) -> Diagnostics:
    '''Validate a read request, returning one error diagnostic per violation'''
    diagnostics = Diagnostics()
    validator = Draft7Validator(request_schema(descriptor))
    for error in sorted(validator.iter_errors(dict(config)), key=lambda e: _attribute_path(e.absolute_path)):
        diagnostics.add_error(
            INVALID_ATTRIBUTE_SUMMARY,
            'Attribute {} {}: {}'.format(
                _attribute_path(error.absolute_path),
                'must follow Backstage format restrictions' if error.validator == 'pattern' else 'is invalid',
                error.message
            )
        )
    return diagnostics
