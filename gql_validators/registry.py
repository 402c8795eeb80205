"""
Entity registry - name to compiled entity mapping for one compiler.

Each GQLCompiler owns exactly one Registry. The compiler fills it once (object
types, then unions, then enums) and seals it; from then on it is only read,
both by callers through GQLCompiler.get_entity() and by lazy entity references
while values are being validated.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping

from gql_validators.exceptions import GQLValidatorsError, UnknownEntityError
from gql_validators.validation.validator import Entity

logger = logging.getLogger(__name__)


class Registry:
    """
    Name -> Entity mapping.

    Attributes:
        sealed: Whether the registry still accepts definitions
    """

    def __init__(self) -> None:
        self._entities: Dict[str, Entity] = {}
        self.sealed = False

    def define(self, entity: Entity) -> Entity:
        """
        Add a compiled entity.

        Args:
            entity: Entity to register under entity.name

        Returns:
            Entity: The registered entity

        Raises:
            GQLValidatorsError: If the registry is sealed or the name is taken
        """
        if self.sealed:
            raise GQLValidatorsError(f"Registry is sealed, cannot define '{entity.name}'")
        if entity.name in self._entities:
            raise GQLValidatorsError(f"Entity '{entity.name}' is already defined")

        self._entities[entity.name] = entity
        logger.debug(f"Defined {entity.kind.value} entity {entity.name}")
        return entity

    def seal(self) -> None:
        self.sealed = True

    def get(self, name: str) -> Entity:
        """
        Look up an entity by name.

        Raises:
            UnknownEntityError: If no entity with that name was defined
        """
        try:
            return self._entities[name]
        except KeyError:
            raise UnknownEntityError(name) from None

    def names(self) -> List[str]:
        return list(self._entities)

    def as_mapping(self) -> Mapping[str, Entity]:
        """Read-only view of the registry contents."""
        return MappingProxyType(self._entities)

    def __contains__(self, name: object) -> bool:
        return name in self._entities

    def __iter__(self) -> Iterator[str]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)
