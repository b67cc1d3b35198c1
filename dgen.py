'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
test record generator
'''

import numpy as np
from faker import Faker
from typing import Any, Dict, List, Optional

# a field spec set to this is left out of the record entirely
_OMIT = object()


class Generator:
    """
    turns a schema into plain dict records.

    a schema is a dict of field -> spec where a spec is one of:
      'word'                              a faker provider name
      ('pyint', {'min_value': 1})         a faker provider with kwargs
      {'_qen_provider': 'choice', 'from': [...]}
      {'_qen_provider': 'literal', 'value': x}
      {'_qen_provider': 'seq', 'start': 0}      running counter per field
      {'_qen_provider': 'sometimes', 'p': 0.5, 'spec': ...}
                                          the field is present with probability p
    anything else is used as a literal.
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._counters: Dict[str, int] = {}

    def _faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _provider(self, field: str, config: Dict) -> Any:
        provider = config['_qen_provider']
        if provider == 'choice':
            options = config['from']
            # index rather than rng.choice so mixed-type options keep their python types
            return options[int(self._rng.integers(0, len(options)))]
        if provider == 'literal':
            return config.get('value')
        if provider == 'seq':
            current = self._counters.get(field, config.get('start', 0))
            self._counters[field] = current + 1
            return current
        if provider == 'sometimes':
            if self._rng.random() >= config.get('p', 0.5):
                return _OMIT
            return self._value(field, config['spec'])
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def _value(self, field: str, spec: Any) -> Any:
        if isinstance(spec, dict) and '_qen_provider' in spec:
            return self._provider(field, spec)
        if isinstance(spec, str) and hasattr(self._fake, spec):
            return self._faker(spec)
        if isinstance(spec, tuple) and len(spec) == 2 and isinstance(spec[1], dict):
            return self._faker(spec[0], spec[1])
        return spec

    def record(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        result = {}
        for field, spec in schema.items():
            value = self._value(field, spec)
            if value is not _OMIT:
                result[field] = value
        return result


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> List[Dict[str, Any]]:
        return [self._generator.record(self._schema) for _ in range(count)]


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
