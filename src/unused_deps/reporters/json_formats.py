"""JSON output formatter."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from unused_deps.models import UnusedReport

logger = logging.getLogger(__name__)


class JSONReporter:
    """Generates JSON format reports."""
    
    def generate_report(self, report: UnusedReport, output_file: Path | None = None) -> str:
        """Generate JSON report.
        
        Args:
            report: Unused dependency report
            output_file: Optional path to save report
            
        Returns:
            JSON string
        """
        data = {
            "version": "1.0",
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "manifest": str(report.manifest_path),
            "summary": self._generate_summary(report),
            "unused_dependencies": report.unused,
            "unused_details": self._unused_details(report),
            "used_dependencies": sorted(report.used),
            "errors": [
                {"file": str(error.path), "type": type(error).__name__, "reason": error.reason}
                for error in report.errors
            ],
        }
        
        json_str = json.dumps(data, indent=2, default=str)
        
        if output_file:
            output_file.write_text(json_str, encoding="utf-8")
            logger.debug(f"Wrote JSON report to {output_file}")
        
        return json_str
    
    @staticmethod
    def _generate_summary(report: UnusedReport) -> dict[str, Any]:
        """Generate summary statistics."""
        return {
            "declared": len(report.declared),
            "unused": len(report.unused),
            "files_scanned": report.files_scanned,
            "files_failed": report.files_failed,
        }
    
    @staticmethod
    def _unused_details(report: UnusedReport) -> list[dict[str, str]]:
        """Version and section of each unused dependency."""
        details = []
        for name in report.unused:
            dep = report.details.get(name)
            if dep is None:
                continue
            details.append({"name": dep.name, "version": dep.version_spec, "section": dep.section})
        return details
