'''
ModelConfig and ModelParam Classes

Package configuration loaded from config.json. Each parameter carries search
bounds so the optimizer can read them from the same place.
'''

from dataclasses import dataclass, field, asdict
from typing import Dict, Any
import json
import pathlib

DEFAULT_CONFIG_PATH = pathlib.Path(__file__).parent.parent.resolve() / 'config.json'

## parameters the package reads from config.json ##
REQUIRED_PARAMS = [
    'ingest_config.max_game_number',
    'optimizer_config.exponent',
]


@dataclass
class ModelParam:
    '''A configured value and the bounds it may be searched within'''
    value: float
    description: str = ''
    opti_min: float = 0.0
    opti_max: float = 1.0

    def __post_init__(self):
        if self.opti_min > self.opti_max:
            raise ValueError(f'Bounds out of order: {self.opti_min} > {self.opti_max}')


@dataclass
class ModelConfig:
    '''
    Parameters keyed as 'section.param_name'
    '''
    params: Dict[str, ModelParam] = field(default_factory=dict)

    @property
    def values(self) -> Dict[str, Any]:
        '''Nested section -> parameter name -> value, as the components expect'''
        result = {}
        for key, param in self.params.items():
            section, param_name = key.split('.', 1)
            result.setdefault(section, {})[param_name] = param.value
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ModelConfig':
        '''
        Build from {section: {param_name: {value, description, opti_min, opti_max}}}
        '''
        params = {}
        for section, section_params in data.items():
            if not isinstance(section_params, dict):
                raise ValueError(f'Config section {section!r} must be a mapping')
            for param_name, param_data in section_params.items():
                params[f'{section}.{param_name}'] = ModelParam(**param_data)
        return cls(params=params)

    @classmethod
    def from_file(cls, filepath: str = None) -> 'ModelConfig':
        '''
        Load from a JSON file (defaults to the package config.json)

        Raises ValueError if a parameter the package reads is missing
        '''
        with open(filepath or DEFAULT_CONFIG_PATH, 'r') as f:
            config = cls.from_dict(json.load(f))
        missing = [k for k in REQUIRED_PARAMS if k not in config.params]
        if missing:
            raise ValueError(f'Config is missing {missing}')
        return config

    def to_file(self, filepath: str = None) -> None:
        '''Save in the nested layout from_file reads'''
        nested = {}
        for key, param in self.params.items():
            section, param_name = key.split('.', 1)
            nested.setdefault(section, {})[param_name] = asdict(param)
        with open(filepath or DEFAULT_CONFIG_PATH, 'w') as f:
            json.dump(nested, f, indent=4)

    def update_config(self, updates: Dict[str, float]) -> None:
        '''Set values for known 'section.param_name' keys; unknown keys are ignored'''
        for key, value in updates.items():
            if key in self.params:
                self.params[key].value = value
