"""Registry of icon definitions available to the icon renderer."""

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from fa_svg_sprite.exceptions import IconLibraryError, InvalidIconDefinitionError, chain_exception
from fa_svg_sprite.models.icon import IconDefinition, IconLookup
from fa_svg_sprite.utils import file_utils

logger = logging.getLogger(__name__)


class IconLibrary:
    """Stores icon definitions by style prefix and icon name.

    Definitions can be added directly or loaded from JSON icon packs. A pack
    is either a list of definitions or a mapping whose values are definitions,
    each shaped like ``{"prefix": "fas", "iconName": "dice-one",
    "icon": [448, 512, [], "f525", "M..."]}``.
    """

    def __init__(self) -> None:
        """Initialize an empty library."""
        self._definitions: dict[str, dict[str, IconDefinition]] = {}

    def __len__(self) -> int:
        return sum(len(icons) for icons in self._definitions.values())

    def __contains__(self, lookup: object) -> bool:
        return isinstance(lookup, IconLookup) and self.find(lookup) is not None

    def add(self, *definitions: IconDefinition | Mapping[str, Any]) -> None:
        """Register icon definitions, replacing existing ones with the same lookup.

        Args:
            *definitions: Definitions as models or raw mappings.

        Raises:
            InvalidIconDefinitionError: If a raw mapping is not a valid definition.
        """
        for definition in definitions:
            parsed = self._parse_definition(definition)
            self._definitions.setdefault(parsed.prefix, {})[parsed.icon_name] = parsed

    def find(self, lookup: IconLookup) -> IconDefinition | None:
        """Find the definition for a lookup.

        Args:
            lookup: Prefix and icon name to find.

        Returns:
            The registered definition, or None if nothing matches.
        """
        return self._definitions.get(lookup.prefix, {}).get(lookup.icon_name)

    def reset(self) -> None:
        """Remove all registered definitions."""
        self._definitions.clear()

    def load_json(self, pack_path: file_utils.PathLike) -> int:
        """Register every definition of a JSON icon pack.

        Args:
            pack_path: Path to the icon pack.

        Returns:
            Number of definitions loaded.

        Raises:
            IconLibraryError: If the pack cannot be read or is not valid JSON.
            InvalidIconDefinitionError: If the pack is not a list or mapping,
                or contains an invalid definition.
        """
        try:
            data = file_utils.read_json(pack_path)
        except (OSError, json.JSONDecodeError) as e:
            raise chain_exception(
                IconLibraryError("Failed to read icon pack", {"source": str(pack_path), "error": str(e)}), e
            )
        entries: Iterable[Any]
        if isinstance(data, list):
            entries = data
        elif isinstance(data, dict):
            entries = data.values()
        else:
            raise InvalidIconDefinitionError(
                "Icon pack must be a list or mapping of definitions",
                {"source": str(pack_path), "type": type(data).__name__},
            )

        definitions = [self._parse_definition(entry, source=str(pack_path)) for entry in entries]
        self.add(*definitions)
        logger.debug(f"Loaded {len(definitions)} icon definitions from {pack_path}")
        return len(definitions)

    @staticmethod
    def _parse_definition(
        definition: IconDefinition | Mapping[str, Any], source: str | None = None
    ) -> IconDefinition:
        if isinstance(definition, IconDefinition):
            return definition
        try:
            return IconDefinition.model_validate(definition)
        except ValidationError as e:
            details: dict[str, Any] = {"error": str(e)}
            if source:
                details["source"] = source
            raise chain_exception(InvalidIconDefinitionError("Invalid icon definition", details), e)
