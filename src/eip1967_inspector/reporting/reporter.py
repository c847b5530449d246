"""Console and file output for inspection results."""

import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, TextIO

from ..core.models import InspectionResult

logger = logging.getLogger(__name__)


def format_abi(abi: List[Dict]) -> str:
    return json.dumps(abi, indent=2)


def print_report(result: InspectionResult, stream: Optional[TextIO] = None) -> None:
    """
    Write the implementation address, then the ABI as indented JSON.

    Args:
        result: Completed inspection
        stream: Output stream (defaults to stdout)
    """
    stream = stream or sys.stdout
    stream.write(f"{result.implementation_address}\n")
    stream.write(f"{format_abi(result.abi)}\n")
    stream.flush()


def save_abi(abi: List[Dict], path: Path) -> Path:
    """Save the ABI as JSON, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(abi, f, indent=2)
    logger.info(f"Saved ABI with {len(abi)} entries to {path}")
    return path
