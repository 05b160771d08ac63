from __future__ import annotations
import math
from typing import Dict, Any, List, Set

_TYPES = {"single", "multiple"}


def _num(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)


def validate(data: Dict[str, Any]) -> List[str]:
    """Structurele fouten: de catalogus is onbruikbaar als deze lijst niet leeg is."""
    errors: List[str] = []
    mod_ids: Set[str] = set()

    for idx, m in enumerate(data.get("modifiers", []), start=1):
        mid = m.get("id") or m.get("_id")
        if not mid:
            errors.append(f"modifier[{idx}] missing id")
            continue
        if mid in mod_ids:
            errors.append(f"duplicate modifier id: {mid}")
        mod_ids.add(mid)
        if m.get("type", "single") not in _TYPES:
            errors.append(f"{mid}: unknown type '{m.get('type')}'")
        seen_opts: Set[str] = set()
        for o in m.get("options", []):
            oid = o.get("id")
            if not oid:
                errors.append(f"{mid}: option without id")
            elif oid in seen_opts:
                errors.append(f"{mid}: duplicate option id {oid}")
            else:
                seen_opts.add(oid)

    seen_inv: Set[str] = set()
    for idx, it in enumerate(data.get("inventory", []), start=1):
        iid = it.get("id") or it.get("_id")
        if not iid:
            errors.append(f"inventory[{idx}] missing id")
        elif iid in seen_inv:
            errors.append(f"duplicate inventory id: {iid}")
        else:
            seen_inv.add(iid)

    for idx, it in enumerate(data.get("items", []), start=1):
        if not (it.get("id") or it.get("_id")):
            errors.append(f"item[{idx}] missing id")

    return errors


def quality_warnings(data: Dict[str, Any]) -> List[str]:
    """
    Datakwaliteit voor de beheerkant. Geen van deze punten blokkeert de
    configuratie; de engine normaliseert ze stil.
    """
    warnings: List[str] = []
    for m in data.get("modifiers", []):
        mid = m.get("id") or m.get("_id")
        opts = m.get("options", [])
        mtype = m.get("type", "single")
        if not opts:
            warnings.append(f"{mid}: modifier has no options")
        defaults = [o for o in opts if o.get("isDefault")]
        if mtype == "single" and len(defaults) > 1:
            warnings.append(f"{mid}: {len(defaults)} default options on a single-select modifier")
        for o in opts:
            p = o.get("price", 0)
            if not _num(p) or p < 0:
                warnings.append(f"{mid}: option {o.get('id')} price must be a number >= 0")
        mn, mx = m.get("minSelections"), m.get("maxSelections")
        if mtype == "multiple" and _num(mn) and _num(mx) and mn > mx:
            warnings.append(f"{mid}: minSelections cannot be greater than maxSelections")
        if mtype == "multiple" and _num(mx) and len(defaults) > mx:
            warnings.append(f"{mid}: more default options than maxSelections")

    mod_ids = {m.get("id") or m.get("_id") for m in data.get("modifiers", [])}
    inv_ids = {it.get("id") or it.get("_id") for it in data.get("inventory", [])}
    for it in data.get("items", []):
        iid = it.get("id") or it.get("_id")
        for ref in it.get("modifiers", []):
            if ref not in mod_ids:
                # modifiers_for filtert deze weg
                warnings.append(f"{iid}: unknown modifier '{ref}'")
        for link in it.get("inventoryItems", []):
            ref = link.get("inventoryItemId")
            if ref not in inv_ids:
                warnings.append(f"{iid}: inventory link to unknown item '{ref}'")
            portion = link.get("portion", 1)
            if not _num(portion) or portion <= 0:
                warnings.append(f"{iid}: portion for '{ref}' must be a positive number")
    return warnings
