"""Keep a caller's vessel selection consistent with the selected port.

Callers run ``reconcile_vessel_selection`` after every port change. The
quote engine assumes the vessel class it receives belongs to the port's
allowed set and does not re-check it.
"""

from typing import List, Optional

from src.models.schema import ReferenceData


def allowed_vessel_classes(reference_data: ReferenceData, port_id: Optional[str]) -> List[str]:
    """Ordered vessel class names allowed from a port ([] for unknown ports)."""
    port = reference_data.get_port(port_id)
    if port is None:
        return []
    return list(port.vessel_classes)


def reconcile_vessel_selection(
    reference_data: ReferenceData,
    port_id: Optional[str],
    current_vessel_class: Optional[str]
) -> Optional[str]:
    """Return the vessel class a caller should have selected for a port.

    Args:
        reference_data: Reference data holding the port catalog
        port_id: Newly selected port
        current_vessel_class: Vessel class selected before the port change

    Returns:
        ``current_vessel_class`` if the port allows it, otherwise the port's
        first allowed class, or None when the port allows none.
    """
    allowed = allowed_vessel_classes(reference_data, port_id)
    if current_vessel_class in allowed:
        return current_vessel_class
    return allowed[0] if allowed else None
