import asyncio
import logging

from asem import latch as latch_

logger = logging.getLogger(__name__)


def join(futures, callback, *, registry=None):
  """
  Invoke callback once every future in futures is done.

  Returns the latch doing the counting. The latch holds one unit of its own
  until all futures are attached, so an empty sequence fires right away. If
  attaching fails, the latch keeps counting only the futures already attached.
  """
  latch = latch_.Latch(1, callback, registry=registry)

  try:
    for future in futures:
      latch.acquire()
      try:
        future.add_done_callback(latch.to_callback())
      except BaseException:
        latch.release()
        raise
  finally:
    latch.release()

  return latch


async def gather(*aws):
  futures = [asyncio.ensure_future(aw) for aw in aws]

  latch = join(futures, lambda: logger.debug("Joined %d awaitables",
                                             len(futures)))
  await latch.wait()

  return [future.result() for future in futures]
