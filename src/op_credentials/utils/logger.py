# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

import sys
from pathlib import Path

from loguru import logger

__all__ = ["logger", "setup_logging"]


def setup_logging(log_dir: str | Path | None = "logs", level: str = "INFO") -> list[int]:
    """Add op_credentials' sinks to the loguru logger.

    Nothing is configured on import; the host application calls this when it
    wants the default sinks. Sinks the host already added are left in place.

    Args:
        log_dir: Directory for the JSON file sink. ``None`` disables the file sink.
        level: Minimum level for both sinks.

    Returns:
        The ids of the added sinks, suitable for ``logger.remove``.
    """
    # Sink 1: Stderr (Human-readable)
    handler_ids = [
        logger.add(
            sys.stderr,
            level=level,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
                "<level>{message}</level>"
            ),
        )
    ]

    if log_dir is None:
        return handler_ids

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    # Sink 2: File (JSON, Rotation, Retention)
    handler_ids.append(
        logger.add(
            log_path / "app.log",
            rotation="500 MB",
            retention="10 days",
            serialize=True,
            enqueue=True,
            level=level,
        )
    )
    return handler_ids
