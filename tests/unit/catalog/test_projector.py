'''Test projecting catalog entities onto state'''
from typing import Any, Dict

import pytest

from catalog.model.entity import Entity
from catalog.model.kinds import get_kind
from catalog.projector import SpecDecodeError, check_spec, complete_spec, project_entity, project_spec

GROUP = get_kind('Group')


def _entity(data: Dict[str, Any]) -> Entity:
    return Entity.from_dict(data, infer_missing=True)


def test_project_entity(mock_entity: Dict[str, Any]):
    '''Test identity and metadata are copied verbatim'''
    state = project_entity(GROUP, _entity(mock_entity), 'example-group', 'example-namespace')

    assert state.id == mock_entity['metadata']['uid']
    assert state.api_version == mock_entity['apiVersion']
    assert state.kind == mock_entity['kind']
    assert state.metadata.uid == mock_entity['metadata']['uid']
    assert state.metadata.etag == mock_entity['metadata']['etag']
    assert state.metadata.labels == mock_entity['metadata']['labels']
    assert state.metadata.annotations == mock_entity['metadata']['annotations']
    assert state.metadata.tags == ['platform', 'infra']
    assert state.metadata.links[0].url == 'https://example.com/group'
    assert state.metadata.links[0].icon == 'group'


def test_project_entity_relations_keep_order(mock_entity: Dict[str, Any]):
    '''Test relations mirror the source order, duplicates included'''
    mock_entity['relations'].append(mock_entity['relations'][1])

    state = project_entity(GROUP, _entity(mock_entity), 'example-group', 'example-namespace')

    assert [r.target_ref for r in state.relations] == [r['targetRef'] for r in mock_entity['relations']]
    assert state.relations[0].target.kind == 'group'
    assert state.relations[0].target.namespace == 'example-namespace'


def test_project_entity_without_optional_metadata(mock_entity: Dict[str, Any]):
    '''Test labels and annotations are empty maps, tags and links absent'''
    for key in ('labels', 'annotations', 'tags', 'links'):
        del mock_entity['metadata'][key]
    mock_entity['metadata']['tags'] = []

    state = project_entity(GROUP, _entity(mock_entity), 'example-group', 'example-namespace')
    output = state.to_dict()

    assert output['metadata']['labels'] == {}
    assert output['metadata']['annotations'] == {}
    assert output['metadata']['tags'] is None
    assert output['metadata']['links'] is None


def test_project_entity_labels_are_copies(mock_entity: Dict[str, Any]):
    '''Test projected maps do not alias the fetched entity'''
    entity = _entity(mock_entity)

    state = project_entity(GROUP, entity, 'example-group', 'example-namespace')
    state.metadata.labels['extra'] = 'value'

    assert 'extra' not in entity.metadata.labels


def test_project_spec_group(mock_entity: Dict[str, Any]):
    '''Test Group spec attributes'''
    spec = project_spec(GROUP, mock_entity['spec'])

    assert spec == {
        'type': 'team',
        'profile': {
            'display_name': 'Example Group',
            'email': 'example-group@example.com',
            'picture': 'https://example.com/group.png',
        },
        'parent': 'group:example-namespace/parent-group',
        'children': [],
        'members': ['user:example-namespace/zoe', 'user:example-namespace/adam', 'user:example-namespace/mia'],
    }


def test_project_spec_component():
    '''Test camelCase catalog keys map onto attributes'''
    spec = project_spec(get_kind('Component'), {
        'type': 'service',
        'lifecycle': 'production',
        'owner': 'group:default/team-a',
        'subcomponentOf': 'component:default/parent',
        'providesApis': ['api:default/a'],
        'consumesApis': ['api:default/b', 'api:default/c'],
        'system': 'system:default/s',
    })

    assert spec['subcomponent_of'] == 'component:default/parent'
    assert spec['provides_apis'] == ['api:default/a']
    assert spec['consumes_apis'] == ['api:default/b', 'api:default/c']
    assert spec['depends_on'] is None


def test_project_spec_missing():
    '''Test a missing spec projects every attribute as unset'''
    spec = project_spec(get_kind('User'), None)

    assert spec == {'profile': None, 'member_of': None}


@pytest.mark.parametrize('spec,message', [
    ({'profile': 'oops'}, 'Invalid spec.profile: expected object, got str'),
    ({'members': 'user:default/zoe'}, 'Invalid spec.members: expected list, got str'),
    ('not a spec', 'Invalid spec: expected object, got str'),
])
def test_check_spec_rejects_wrong_types(spec, message: str):
    with pytest.raises(SpecDecodeError) as e:
        check_spec(GROUP, spec)

    assert str(e.value) == message


def test_check_spec_accepts_entity(mock_entity: Dict[str, Any]):
    check_spec(GROUP, mock_entity['spec'])
    check_spec(GROUP, None)
    check_spec(GROUP, {'profile': None, 'members': None})


def test_complete_spec():
    '''Test unset attributes are filled with None and values kept'''
    spec = complete_spec(GROUP, {'members': ['user:default/zoe'], 'profile': {'email': 'a@example.com'}})

    assert spec == {
        'type': None,
        'profile': {'display_name': None, 'email': 'a@example.com', 'picture': None},
        'parent': None,
        'children': None,
        'members': ['user:default/zoe'],
    }
    assert complete_spec(GROUP, None) is None
