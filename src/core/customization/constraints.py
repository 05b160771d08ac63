from __future__ import annotations
from typing import AbstractSet, List, Mapping
from src.core.menu.models import Modifier


def can_select(modifier: Modifier, current: AbstractSet[str], option_id: str) -> bool:
    if modifier.is_single:
        return True  # single vervangt altijd
    mx = modifier.max_selections
    if mx and len(current) >= mx and option_id not in current:
        return False
    return True


def can_deselect(modifier: Modifier, current: AbstractSet[str], option_id: str) -> bool:
    if modifier.is_single:
        # verplichte single houdt altijd precies één keuze; wisselen gaat via select
        return not modifier.required
    mn = modifier.min_selections
    if mn and len(current) <= mn:
        return False
    return True


def is_satisfied(modifier: Modifier, current: AbstractSet[str]) -> bool:
    if not modifier.required:
        return True
    if not modifier.options:
        return True  # niets te kiezen; quality_warnings meldt dit bij het laden
    if modifier.is_single:
        return len(current) == 1
    return len(current) >= (modifier.min_selections or 1)


def missing_required(modifiers: List[Modifier],
                     state: Mapping[str, AbstractSet[str]]) -> List[Modifier]:
    return [m for m in modifiers if not is_satisfied(m, state.get(m.id, set()))]


def can_checkout(modifiers: List[Modifier], state: Mapping[str, AbstractSet[str]]) -> bool:
    return not missing_required(modifiers, state)


def selection_hint(modifier: Modifier) -> str:
    """Hulptekst onder de modifier in de bestel-UI."""
    if modifier.is_single:
        return "اختر خياراً واحداً"
    mn, mx = modifier.min_selections, modifier.max_selections
    if mn and mx:
        return f"اختر من {mn} إلى {mx} خيارات"
    if mx:
        return f"اختر حتى {mx} خيارات"
    if mn:
        return f"اختر {mn} خيارات على الأقل"
    return "اختر خيارات متعددة"
