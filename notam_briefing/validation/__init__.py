"""Block validation: separate NOTAM blocks from briefing noise."""

from notam_briefing.validation.sniffers import (
    BlockSniffer,
    FlightPlanSniffer,
    FuelTableSniffer,
    WaypointSniffer,
    ProcedureSniffer,
    default_sniffers,
)
from notam_briefing.validation.block_validator import (
    BlockValidator,
    validate_notam_block,
    validate_blocks,
)

__all__ = [
    'BlockSniffer',
    'FlightPlanSniffer',
    'FuelTableSniffer',
    'WaypointSniffer',
    'ProcedureSniffer',
    'default_sniffers',
    'BlockValidator',
    'validate_notam_block',
    'validate_blocks',
]
