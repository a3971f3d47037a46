"""Reference data schema - immutable catalogs and multiplier tables for voyage quoting."""

from types import MappingProxyType
from typing import Annotated, Optional, Mapping
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

# Pricing factors must be finite and strictly positive
Multiplier = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class Port(BaseModel):
    """A departure port offered by the voyage planner.

    Ports reference the vessel classes they can dispatch by name only,
    so vessel data lives in exactly one place (the vessel catalog).

    Attributes:
        id: Unique identifier (e.g., 'haifa')
        name: Display name (e.g., 'Haifa Marina')
        tagline: Short descriptive tagline
        scenic_highlight: Scenic highlight used in the pairing advisory
        vessel_classes: Ordered names of the vessel classes allowed from this port
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "haifa",
                "name": "Haifa Marina",
                "tagline": "Dramatic Carmel cliffs and blue water crossings.",
                "scenic_highlight": "Wake up to Bahá'í gardens cascading to the sea.",
                "vessel_classes": ["Luxury Catamaran", "Expedition Motor Yacht"]
            }
        }
    )

    id: str = Field(min_length=1, description="Unique port identifier")
    name: str = Field(description="Display name")
    tagline: str = Field(default="", description="Descriptive tagline")
    scenic_highlight: str = Field(default="", description="Scenic highlight text")
    vessel_classes: tuple[str, ...] = Field(
        default=(),
        description="Ordered names of vessel classes allowed from this port"
    )


class VesselClass(BaseModel):
    """A category of charter vessel.

    Attributes:
        name: Unique vessel class name (e.g., 'Luxury Catamaran')
        base_rate: Base charter rate in currency units (positive)
        capacity: Rated passenger capacity (positive)
        style: Descriptive style text shown as a form hint
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "Luxury Catamaran",
                "base_rate": 5400,
                "capacity": 12,
                "style": "Panoramic decks and stability for effortless lounging."
            }
        }
    )

    name: str = Field(min_length=1, description="Unique vessel class name")
    base_rate: float = Field(gt=0, allow_inf_nan=False, description="Base charter rate in currency units")
    capacity: int = Field(gt=0, description="Rated passenger capacity")
    style: str = Field(default="", description="Descriptive style text")


class TravelStyle(BaseModel):
    """A thematic travel preference (e.g., sunset, culinary)."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Unique travel style identifier")
    label: str = Field(description="Display label")


class ReferenceData(BaseModel):
    """Complete, immutable reference data for quoting.

    Loaded once at start-up and shared by every quote computation.
    Provides lookups that return None (or a neutral 1.0 factor) for
    unknown keys instead of raising, so the quote engine stays total.

    Attributes:
        ports: Departure ports, in display order
        vessel_classes: Vessel catalog
        travel_styles: Travel styles, in display order (first is the default)
        location_multipliers: Port id -> pricing factor (missing ports use 1.0)
        style_multipliers: Travel style id -> pricing factor (missing styles use 1.0)
        brand_name: Operator brand shown by callers
        version: Reference data version/year
    """
    model_config = ConfigDict(frozen=True)

    ports: tuple[Port, ...] = Field(default=(), description="Departure ports")
    vessel_classes: tuple[VesselClass, ...] = Field(default=(), description="Vessel catalog")
    travel_styles: tuple[TravelStyle, ...] = Field(description="Travel styles; the first is the default")
    location_multipliers: Mapping[str, Multiplier] = Field(
        default_factory=dict,
        validate_default=True,
        description="Port id -> pricing factor"
    )
    style_multipliers: Mapping[str, Multiplier] = Field(
        default_factory=dict,
        validate_default=True,
        description="Travel style id -> pricing factor"
    )
    brand_name: str = Field(default="Tel Aviv Yacht", description="Operator brand name")
    version: str = Field(default="2025", description="Reference data version/year")

    @field_validator("location_multipliers", "style_multipliers")
    @classmethod
    def _read_only_factors(cls, value: Mapping[str, float]) -> Mapping[str, float]:
        return MappingProxyType(dict(value))

    @field_serializer("location_multipliers", "style_multipliers")
    def _serialize_factors(self, value: Mapping[str, float]) -> dict:
        return dict(value)

    @model_validator(mode="after")
    def _check_catalogs(self) -> "ReferenceData":
        if not self.travel_styles:
            raise ValueError("at least one travel style is required")

        for label, keys in (
            ("port id", [p.id for p in self.ports]),
            ("vessel class name", [v.name for v in self.vessel_classes]),
            ("travel style id", [s.id for s in self.travel_styles]),
        ):
            duplicates = sorted({k for k in keys if keys.count(k) > 1})
            if duplicates:
                raise ValueError(f"duplicate {label}(s): {', '.join(duplicates)}")

        known_vessels = {v.name for v in self.vessel_classes}
        for port in self.ports:
            unknown = [name for name in port.vessel_classes if name not in known_vessels]
            if unknown:
                raise ValueError(
                    f"port '{port.id}' allows unknown vessel class(es): {', '.join(unknown)}"
                )
        return self

    def get_port(self, port_id: Optional[str]) -> Optional[Port]:
        """Return the port with the given id, or None."""
        return next((p for p in self.ports if p.id == port_id), None)

    def get_vessel_class(self, name: Optional[str]) -> Optional[VesselClass]:
        """Return the vessel class with the given name, or None."""
        return next((v for v in self.vessel_classes if v.name == name), None)

    def get_travel_style(self, style_id: Optional[str]) -> Optional[TravelStyle]:
        """Return the travel style with the given id, or None."""
        return next((s for s in self.travel_styles if s.id == style_id), None)

    @property
    def default_travel_style(self) -> TravelStyle:
        """The travel style preselected when a request names none."""
        return self.travel_styles[0]

    def location_factor(self, port_id: Optional[str]) -> float:
        """Pricing factor for a port (1.0 when the port has no entry)."""
        return self.location_multipliers.get(port_id, 1.0)

    def style_factor(self, style_id: Optional[str]) -> float:
        """Pricing factor for a travel style (1.0 when the style has no entry)."""
        return self.style_multipliers.get(style_id, 1.0)
