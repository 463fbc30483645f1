import logging
import os


def _flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() not in ("0", "false", "no", "off", "")


LOG_LEVEL = os.environ.get("MULTISIG_LOG_LEVEL", "INFO").upper()
# log entry and exit of every validation
TRACE = _flag("MULTISIG_TRACE", True)
# sample time and gas around every validation
PROFILE = _flag("MULTISIG_PROFILE", True)
KEYS_DIR = os.environ.get("MULTISIG_KEYS_DIR", "keys")


def setup_logging(level: str = LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
