"""DurationService: engine operations wrapped in ServiceResult for the CLI."""

from __future__ import annotations

import logging

from durctl.config.models import EngineConfig
from durctl.domain.errors import DurationError
from durctl.domain.instants import format_utc_iso
from durctl.domain.parser import parse_duration
from durctl.services.engine import StartValue, create_adder
from durctl.services.result import ServiceResult
from durctl.services.telemetry import traced

logger = logging.getLogger(__name__)

NAIVE_WARNING = (
    "Naive calendar in use: days are fixed 24h and local start times use the host zone"
)


class DurationService:
    """Parse durations and compute end instants using the configured engine."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()

    @traced
    def parse(self, duration: str) -> ServiceResult:
        """Normalize *duration* without adding it to anything."""
        op = "parse_duration"
        try:
            bag = parse_duration(duration)
        except DurationError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": duration,
                **bag.model_dump(),
                "iso": bag.to_iso(),
                "total_milliseconds": bag.total_milliseconds(),
            },
        )

    @traced
    def add(
        self,
        duration: str,
        *,
        start: StartValue = None,
        timezone: str | None = None,
        calendar: str | None = None,
    ) -> ServiceResult:
        """Add *duration* to *start* in *timezone*; config fills the gaps."""
        op = "add_duration"
        zone = timezone or self._config.timezone
        mode = calendar or self._config.calendar
        if start is None:
            start = self._config.default_start

        try:
            adder = create_adder(zone, calendar=mode)
            warnings = [] if adder.calendar.dst_aware else [NAIVE_WARNING]
            outcome = adder.compute(duration, start)
        except DurationError as exc:
            logger.debug("add_duration failed: %s", exc)
            return ServiceResult.failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "ends_at": outcome.ends_at,
                "starts_at": format_utc_iso(outcome.start.value),
                "start_local": outcome.start.value.isoformat(),
                "timezone": zone,
                "duration": outcome.duration.to_iso(),
                "calendar": adder.calendar.name,
            },
            warnings=warnings,
        )
