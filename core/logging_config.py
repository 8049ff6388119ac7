from pathlib import Path
import logging
import sys
from typing import Optional
from datetime import datetime

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def setup_logging(
    logs_dir: Optional[str | Path] = None,
    log_file_name: str = "server.log",
    level: str | int = logging.INFO,
) -> logging.Logger:
    """Configure root logging to stderr and a timestamped file under `logs_dir`.

    stdout is reserved for the MCP stdio transport, so nothing is ever logged there.
    Idempotent: calling multiple times won't add duplicate handlers.
    A relative `logs_dir` is resolved against the project root.
    """
    if logs_dir is None:
        logs_dir = PROJECT_ROOT / "logs"
    else:
        logs_dir = Path(logs_dir)
        if not logs_dir.is_absolute():
            logs_dir = PROJECT_ROOT / logs_dir

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    # One file per run; an existing FileHandler from an earlier call is reused
    if not any(isinstance(h, logging.FileHandler) for h in root_logger.handlers):
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base = Path(log_file_name).stem
        ext = Path(log_file_name).suffix or ".log"
        log_file = logs_dir / f"{base}_{timestamp}{ext}"
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            # read-only install locations still get stderr logging
            sys.stderr.write(f"File logging disabled ({e})\n")
        else:
            fh.setFormatter(formatter)
            fh.setLevel(level)
            root_logger.addHandler(fh)

    stream_stderr_exists = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in root_logger.handlers
    )
    if not stream_stderr_exists:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(formatter)
        sh.setLevel(level)
        root_logger.addHandler(sh)

    return logging.getLogger("batchdata")
