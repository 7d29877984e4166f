from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional

from loguru import logger

from pyoptional import __version__

PACKAGE = "pyoptional"

_CONFIGURED = False
_HANDLER_IDS: List[int] = []


def _package_filter(metadata: dict, level: Optional[str] = None) -> Callable[[dict], bool]:
    def _filter(record: dict) -> bool:
        name = record["name"] or ""
        if name != PACKAGE and not name.startswith(PACKAGE + "."):
            return False
        if level is not None and record["level"].name != level:
            return False
        for key, value in metadata.items():
            record["extra"].setdefault(key, value)
        return True

    return _filter


def configure_logging(
    service: str = PACKAGE,
    version: Optional[str] = None,
    environment: Optional[str] = None,
    *,
    force: bool = False,
) -> None:
    """
    Add Loguru sinks for pyoptional records and enable them.

    Only pyoptional's own records reach these sinks, and sinks added by the
    host application are left in place. Always adds a stderr sink at
    PYOPTIONAL_LOG_LEVEL (default WARNING). When PYOPTIONAL_LOG_DIR is set,
    also writes
      • <dir>/YYYY-MM-DD/debug.json
      • <dir>/YYYY-MM-DD/info.json
      • <dir>/YYYY-MM-DD/error.json
    as JSON lines whose extra carries service/version/env. Environment
    variables are read on every call.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    if version is None:
        version = os.getenv("PYOPTIONAL_VERSION", __version__)
    if environment is None:
        environment = os.getenv("PYOPTIONAL_ENV", "dev")
    metadata = {"service": service, "version": version, "env": environment}

    while _HANDLER_IDS:
        logger.remove(_HANDLER_IDS.pop())

    log_dir = os.getenv("PYOPTIONAL_LOG_DIR")
    if log_dir:
        day_dir = Path(log_dir) / datetime.now(timezone.utc).strftime("%Y-%m-%d")
        day_dir.mkdir(parents=True, exist_ok=True)

        common_kwargs = {
            "serialize": True,
            "rotation": "10 MB",
            "retention": "30 days",
            "enqueue": True,
        }

        for level in ("DEBUG", "INFO", "ERROR"):
            _HANDLER_IDS.append(
                logger.add(
                    day_dir / f"{level.lower()}.json",
                    level=level,
                    filter=_package_filter(metadata, level),
                    **common_kwargs,
                )
            )

    _HANDLER_IDS.append(
        logger.add(
            sys.stderr,
            level=os.getenv("PYOPTIONAL_LOG_LEVEL", "WARNING").upper(),
            filter=_package_filter(metadata),
            colorize=sys.stderr.isatty(),
            enqueue=False,
        )
    )
    logger.enable(PACKAGE)

    _CONFIGURED = True
    logger.info(
        "Logging configured service={service} env={env} file_sinks={files}",
        service=service,
        env=environment,
        files=bool(log_dir),
    )
