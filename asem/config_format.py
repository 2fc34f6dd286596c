import logging
import yaml

from asem import config

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Demo(config.Section):
  tasks = config.optional(config.non_negative(int), 3)
  max_delay = config.optional(config.non_negative(int), 1)


class Config(config.Section):
  debug = config.optional(bool, False)
  log_level = config.optional(config.any(str, LOG_LEVELS), "INFO")
  demo = config.optional(Demo)


def load(filename=None):
  if filename is None:
    cfg = {}
  else:
    with open(filename, "r") as f:
      cfg = yaml.safe_load(f)

  try:
    return config.validate(cfg, Config)
  except config.ParseError:
    logger.critical("Configuration invalid.")
    raise


def apply(cfg, registry):
  registry.enabled = cfg["debug"]
  logging.getLogger("asem").setLevel(cfg["log_level"])
