import asyncio
import logging

from asem import errors
from asem import registry as latch_registry

logger = logging.getLogger(__name__)


class Latch(object):
  """
  An asynchronous semaphore.

  The latch counts outstanding units of work. acquire() adds one, release()
  takes one away, and the release that brings the count to zero invokes the
  callback exactly once, synchronously, before it returns. After that the
  latch is spent: acquiring raises, and so does releasing.

  A latch created with a count of 0 does not fire by itself. It fires once an
  acquire() is matched by a release().
  """

  def __init__(self, count=0, callback=None, *, registry=None):
    if not count:
      count = 0

    if isinstance(count, bool) or not isinstance(count, int):
      raise TypeError("latch count must be an integer")

    if count < 0:
      raise ValueError("latch count cannot be negative")

    if registry is None:
      registry = latch_registry.default

    self._count = count
    self.callback = callback
    self.registry = registry
    self.id = None

    self._fired = False
    self._event = None

    self.registry.register(self)

  @property
  def count(self):
    return self._count

  def get_count(self):
    return self._count

  @property
  def fired(self):
    return self._fired

  def acquire(self):
    if self._fired:
      raise errors.LatchAlreadyFiredError(self)

    self._count += 1
    self.registry.trace("Acquired", self)

  def release(self):
    if self._fired:
      raise errors.LatchDoubleFireError(self)

    if self._count <= 0:
      raise errors.LatchUnderflowError(self)

    self._count -= 1
    self.registry.trace("Released", self)

    if self._count == 0:
      self._fire()

  signal = release

  def _fire(self):
    self._fired = True
    self.registry.deregister(self)

    if self._event is not None:
      self._event.set()

    if callable(self.callback):
      self.callback()
    elif self.callback is not None:
      logger.warning("Latch callback %r is not callable, ignoring",
                     self.callback)

  def to_callback(self):
    def release(*args):
      self.release()
    return release

  async def wait(self):
    if self._fired:
      return

    if self._event is None:
      self._event = asyncio.Event()
    await self._event.wait()

  def __repr__(self):
    return "<Latch id={} count={} {}>".format(
        self.id, self._count, "fired" if self._fired else "pending")


AsyncLatch = Latch
