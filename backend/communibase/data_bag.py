"""
DataBag - Generic nested record store keyed by dotted paths.

Responsibilities:
- Hold entity data under an entity type namespace (e.g. "event")
- Read values by dotted path with a default fallback
- Write values by dotted path, creating intermediate mappings
- Hand a copy of the state back to the persistence layer
"""
import copy
import logging
from typing import Any, Dict, List, Optional, Tuple

from communibase.exceptions import InvalidDataBagPathError

logger = logging.getLogger(__name__)

_MISSING = object()


class DataBag:
    """Nested mapping of entity type -> entity data, addressed by dotted paths."""

    def __init__(self):
        self._data: Dict[str, Dict[str, Any]] = {}

    @classmethod
    def from_entity_data(cls, entity_type: str, data: Dict[str, Any]) -> "DataBag":
        bag = cls()
        bag.add_entity_data(entity_type, data)
        return bag

    def add_entity_data(self, entity_type: str, data: Dict[str, Any]) -> None:
        self._data[entity_type] = copy.deepcopy(dict(data))

    def has_entity_data(self, entity_type: str) -> bool:
        return entity_type in self._data

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get a value by dotted path.

        Args:
            path: "<entityType>.<key>[.<key>...]"; numeric keys index lists
            default: Returned when the path is missing or holds None

        Returns:
            A deep copy of the stored value, or default
        """
        entity_type, keys = self._split(path)
        node = self._data.get(entity_type, _MISSING)
        for key in keys:
            node = self._child(node, key)
            if node is _MISSING:
                break

        if node is _MISSING or node is None:
            return default
        return copy.deepcopy(node)

    def set(self, path: str, value: Any) -> None:
        """
        Set a value by dotted path, creating intermediate mappings.

        Raises:
            InvalidDataBagPathError: path names only an entity type
        """
        entity_type, keys = self._split(path)
        if not keys:
            raise InvalidDataBagPathError(f"Path '{path}' must contain a key below the entity type")

        node = self._data.setdefault(entity_type, {})
        for key in keys[:-1]:
            if isinstance(node, list) and key.isdigit() and int(key) < len(node):
                node = node[int(key)]
                continue
            if not isinstance(node, dict):
                raise InvalidDataBagPathError(f"Path '{path}' runs through a non-mapping value")
            child = node.get(key)
            if not isinstance(child, (dict, list)):
                child = node[key] = {}
            node = child

        last = keys[-1]
        if isinstance(node, list) and last.isdigit() and int(last) < len(node):
            node[int(last)] = copy.deepcopy(value)
        elif isinstance(node, dict):
            node[last] = copy.deepcopy(value)
        else:
            raise InvalidDataBagPathError(f"Path '{path}' cannot be written")
        logger.debug("DataBag set %s", path)

    def get_state(self, entity_type: Optional[str] = None) -> Dict[str, Any]:
        if entity_type is None:
            return copy.deepcopy(self._data)
        return copy.deepcopy(self._data.get(entity_type, {}))

    @staticmethod
    def _split(path: str) -> Tuple[str, List[str]]:
        if not path:
            raise InvalidDataBagPathError("Path must not be empty")
        entity_type, *keys = path.split(".")
        return entity_type, keys

    @staticmethod
    def _child(node: Any, key: str) -> Any:
        if isinstance(node, dict):
            return node.get(key, _MISSING)
        if isinstance(node, list) and key.isdigit():
            index = int(key)
            return node[index] if index < len(node) else _MISSING
        return _MISSING
