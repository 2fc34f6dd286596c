import argparse
import asyncio
import coloredlogs
import logging
import random
import sys

from asem import config_format
from asem import join
from asem import registry

logger = logging.getLogger("asem.demo")


async def work(i, max_delay):
  delay = random.uniform(0, max_delay)
  await asyncio.sleep(delay)
  logger.info("Task %d finished after %.2fs", i, delay)
  return i


async def run(tasks, max_delay):
  futures = [asyncio.ensure_future(work(i, max_delay)) for i in range(tasks)]
  latch = join.join(futures,
                    lambda: logger.info("All %d tasks finished", tasks))
  await latch.wait()


def main(argv=None):
  coloredlogs.install(level=logging.INFO)
  logging.getLogger("asyncio").setLevel(logging.WARN)

  parser = argparse.ArgumentParser(
      formatter_class=argparse.ArgumentDefaultsHelpFormatter)
  parser.add_argument("--config", "-c", help="file to load configuration from",
                      default=None)
  parser.add_argument("--debug", action="store_true",
                      help="track unfired latches")
  parser.add_argument("--tasks", type=int, default=None,
                      help="number of tasks to join")

  args = parser.parse_args(argv)
  if args.tasks is not None and args.tasks < 0:
    parser.error("--tasks must not be negative")

  cfg = config_format.load(args.config)
  if args.debug:
    cfg["debug"] = True
  if args.tasks is not None:
    cfg["demo"]["tasks"] = args.tasks

  config_format.apply(cfg, registry.default)
  coloredlogs.install(level=cfg["log_level"])

  asyncio.run(run(cfg["demo"]["tasks"], cfg["demo"]["max_delay"]))

  unfired = registry.list_unfired()
  for latch in unfired:
    logger.error("Latch never fired: %r", latch)

  return 1 if unfired else 0


if __name__ == "__main__":
  sys.exit(main())
