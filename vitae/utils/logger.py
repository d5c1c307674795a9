"""
Session logging for vitae runs.

One session = one log directory holding `<context>.log`. The file keeps every
record at DEBUG; the terminal shows INFO and above. Each session opens with a
provenance block so a rendered page can be traced back to the command,
package version and theme that produced it.

Context-specific wrappers live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from loguru import logger

import vitae

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
PROVENANCE_RULE = "-" * 60


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Point loguru at a fresh session directory.

    Replaces any existing sinks with a DEBUG file sink and a colorized
    console sink, then writes the provenance block.

    Args:
        context_name: Names the log file (e.g., "render" -> render.log)
        log_dir: Session directory, created if missing
        extra_provenance: Extra "key: value" lines for the provenance block
        console_level: Minimum level echoed to stdout

    Returns:
        Path to the session log file

    Example:
        log_file = setup_logger("render", Path("outs/logs/render_20261019_123456"),
                                extra_provenance={"Theme": "forest"})
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    for line in provenance_lines(extra_provenance):
        logger.info(line)

    return log_file


def provenance_lines(extra: Optional[Dict[str, object]] = None) -> List[str]:
    """
    Lines describing who produced this session.

    Args:
        extra: Session-specific entries appended after the standard ones

    Returns:
        Lines framed by PROVENANCE_RULE
    """
    entries = {
        "vitae": vitae.__version__,
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        **(extra or {}),
    }
    return [PROVENANCE_RULE, *(f"{key}: {value}" for key, value in entries.items()), PROVENANCE_RULE]
