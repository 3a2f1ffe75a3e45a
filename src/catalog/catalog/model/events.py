from typing import Any, Dict, Optional

from aws_lambda_powertools.utilities.data_classes.common import DictWrapper


class ReadEntityEvent(DictWrapper):
    '''Data source read request for one catalog entity'''
    @property
    def kind(self) -> str:
        '''Entity kind or data source type name'''
        return self['kind']

    @property
    def name(self) -> str:
        '''Name of the entity'''
        return self['name']

    @property
    def namespace(self) -> Optional[str]:
        '''Namespace of the entity, if set'''
        return self.get('namespace')

    @property
    def fallback(self) -> Optional[Dict[str, Any]]:
        '''Static replica of the entity, if set'''
        return self.get('fallback')

    @property
    def config(self) -> Dict[str, Any]:
        '''Data source configuration, i.e. the event without its kind'''
        return {k: v for k, v in self._data.items() if k != 'kind'}
