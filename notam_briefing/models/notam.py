"""NOTAM data model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple, List, Dict, Any


class NotamGroup(Enum):
    """
    Operational group a NOTAM is displayed under.

    Groups 1-8 apply to aerodrome NOTAMs, groups 9-14 to FIR-wide NOTAMs.
    Values are the identifiers used when serializing a NOTAM.
    """
    RUNWAYS = "runways"
    TAXIWAYS = "taxiways"
    INSTRUMENT_PROCEDURES = "instrumentProcedures"
    AIRPORT_SERVICES = "airportServices"
    LIGHTING = "lighting"
    HAZARDS = "hazards"
    ADMIN = "admin"
    OTHER = "other"
    FIR_AIRSPACE_RESTRICTIONS = "firAirspaceRestrictions"
    FIR_ATC_NAVIGATION = "firAtcNavigation"
    FIR_OBSTACLES_CHARTS = "firObstaclesCharts"
    FIR_INFRASTRUCTURE = "firInfrastructure"
    FIR_DRONE_OPERATIONS = "firDroneOperations"
    FIR_ADMINISTRATIVE = "firAdministrative"

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        return _GROUP_LABELS[self]

    @property
    def display_index(self) -> int:
        """1-based position of the group in display order."""
        return list(NotamGroup).index(self) + 1

    @property
    def is_fir(self) -> bool:
        return self.name.startswith('FIR_')

    @classmethod
    def display_order(cls) -> List['NotamGroup']:
        """All groups in the order they are presented to a pilot."""
        return list(cls)

    @classmethod
    def from_value(cls, value: str) -> Optional['NotamGroup']:
        """
        Look up a group by its serialized value.

        Args:
            value: Serialized group identifier (e.g., "runways")

        Returns:
            NotamGroup or None if the value is unknown
        """
        try:
            return cls(value)
        except ValueError:
            return None


_GROUP_LABELS: Dict[NotamGroup, str] = {
    NotamGroup.RUNWAYS: "Runways",
    NotamGroup.TAXIWAYS: "Taxiways",
    NotamGroup.INSTRUMENT_PROCEDURES: "Instrument Procedures",
    NotamGroup.AIRPORT_SERVICES: "Airport Services",
    NotamGroup.LIGHTING: "Lighting",
    NotamGroup.HAZARDS: "Hazards",
    NotamGroup.ADMIN: "Administrative",
    NotamGroup.OTHER: "Other",
    NotamGroup.FIR_AIRSPACE_RESTRICTIONS: "FIR Airspace Restrictions",
    NotamGroup.FIR_ATC_NAVIGATION: "FIR ATC/Navigation",
    NotamGroup.FIR_OBSTACLES_CHARTS: "FIR Obstacles/Charts",
    NotamGroup.FIR_INFRASTRUCTURE: "FIR Infrastructure",
    NotamGroup.FIR_DRONE_OPERATIONS: "FIR Drone Operations",
    NotamGroup.FIR_ADMINISTRATIVE: "FIR Administrative",
}


@dataclass(frozen=True)
class ParsedNotam:
    """
    A NOTAM parsed from a single text block.

    Field contents are kept verbatim (trimmed). Dates that could not be parsed
    are None and the problem is recorded in ``warnings``. ``raw_text`` always
    holds the trimmed source block so a briefing can fall back to showing it.

    Attributes:
        notam_id: Identifier such as "A1234/24", or "UNKNOWN"
        q_code: 5-letter Q-code (e.g., "QMRLC") or None
        field_a: Location (A line)
        field_b: Start of validity, raw (B line)
        field_c: End of validity, raw (C line)
        field_d: Schedule, raw (D line)
        field_e: Message body (E line)
        field_f: Lower limit (F line)
        field_g: Upper limit (G line)
        valid_from: Parsed B line
        valid_to: Parsed C line, or a far-future sentinel for PERM
        is_permanent: True when the C line is PERM/PERMANENT
        raw_text: Trimmed source block
        warnings: Field-level problems, empty when well formed
        group: Operational group

    Example:
        notam = parse_notam('''
            A1234/24 NOTAMN
            Q) LFFF/QMRLC/IV/NBO/A/000/999/4901N00225E005
            A) LFPG B) 2401150800 C) 2401152000
            E) RWY 09L/27R CLSD DUE TO MAINTENANCE
        ''')
    """

    raw_text: str
    notam_id: str = "UNKNOWN"
    q_code: Optional[str] = None

    # ICAO fields
    field_a: str = ""
    field_b: str = ""
    field_c: str = ""
    field_d: str = ""
    field_e: str = ""
    field_f: str = ""
    field_g: str = ""

    # Validity
    valid_from: Optional[datetime] = None
    valid_to: Optional[datetime] = None
    is_permanent: bool = False

    warnings: Tuple[str, ...] = field(default_factory=tuple)
    group: NotamGroup = NotamGroup.OTHER

    @property
    def location(self) -> str:
        """Location key used for grouping (field A or "UNKNOWN")."""
        return self.field_a or "UNKNOWN"

    @property
    def is_well_formed(self) -> bool:
        return not self.warnings

    @property
    def is_cancellation(self) -> bool:
        """True for cancellation NOTAMs, which carry no operational value."""
        return "CNL NOTAM" in self.raw_text.upper()

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to dictionary for JSON export.

        Returns:
            Dictionary representation suitable for JSON serialization.
        """
        return {
            'notam_id': self.notam_id,
            'q_code': self.q_code,
            'field_a': self.field_a,
            'field_b': self.field_b,
            'field_c': self.field_c,
            'field_d': self.field_d,
            'field_e': self.field_e,
            'field_f': self.field_f,
            'field_g': self.field_g,
            'valid_from': self.valid_from.isoformat() if self.valid_from else None,
            'valid_to': self.valid_to.isoformat() if self.valid_to else None,
            'is_permanent': self.is_permanent,
            'raw_text': self.raw_text,
            'warnings': list(self.warnings),
            'group': self.group.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParsedNotam':
        """
        Create ParsedNotam from dictionary.

        Args:
            data: Dictionary as produced by ``to_dict``

        Returns:
            ParsedNotam instance
        """
        valid_from = data.get('valid_from')
        valid_to = data.get('valid_to')
        return cls(
            raw_text=data.get('raw_text', ''),
            notam_id=data.get('notam_id') or "UNKNOWN",
            q_code=data.get('q_code'),
            field_a=data.get('field_a', ''),
            field_b=data.get('field_b', ''),
            field_c=data.get('field_c', ''),
            field_d=data.get('field_d', ''),
            field_e=data.get('field_e', ''),
            field_f=data.get('field_f', ''),
            field_g=data.get('field_g', ''),
            valid_from=datetime.fromisoformat(valid_from) if valid_from else None,
            valid_to=datetime.fromisoformat(valid_to) if valid_to else None,
            is_permanent=bool(data.get('is_permanent', False)),
            warnings=tuple(data.get('warnings', ())),
            group=NotamGroup.from_value(data.get('group', '')) or NotamGroup.OTHER,
        )

    def __repr__(self) -> str:
        return f"ParsedNotam({self.notam_id}, {self.location}, {self.group.value})"

    def __str__(self) -> str:
        body = self.field_e[:60] + "..." if len(self.field_e) > 60 else self.field_e
        return f"{self.notam_id} {self.location}: {body}"
