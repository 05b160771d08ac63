from __future__ import annotations
import logging
from typing import Dict, List, Set
from src.core.menu.models import Modifier

log = logging.getLogger(__name__)


def _seed(modifier: Modifier) -> List[str]:
    defaults = [o.id for o in modifier.options if o.is_default]
    if defaults:
        if modifier.is_single and len(defaults) > 1:
            log.warning("modifier %s: %d defaults on single-select, keeping %s",
                        modifier.id, len(defaults), defaults[0])
            return defaults[:1]
        mx = modifier.max_selections
        if not modifier.is_single and mx and len(defaults) > mx:
            log.warning("modifier %s: %d defaults exceed maxSelections=%d",
                        modifier.id, len(defaults), mx)
            return defaults[:mx]
        return defaults
    if modifier.required and modifier.is_single and modifier.options:
        # geen expliciete default: eerste optie in catalogusvolgorde
        return [modifier.options[0].id]
    return []


def initialize(modifiers: List[Modifier]) -> Dict[str, Set[str]]:
    """Begintoestand voor één configuratiesessie. Zelfde catalogus -> zelfde toestand."""
    return {m.id: set(_seed(m)) for m in modifiers}
