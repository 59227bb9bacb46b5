"""Logging helpers for configuration values."""

import logging


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a secret, keeping a few characters on each end.

    Args:
        value: The secret to mask
        keep_chars: Number of characters to keep visible at each end

    Returns:
        The masked value, or "Not Provided" when empty
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}{'*' * (len(value) - keep_chars * 2)}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    service: str,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log a configuration parameter, masking it when sensitive."""
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"{service} {param}: {display_value}")
