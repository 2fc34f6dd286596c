import logging

logger = logging.getLogger(__name__)


class Registry(object):
  """
  Tracks latches that have been created but not yet fired.

  Nothing is recorded while the registry is disabled. Latches register
  themselves on construction and deregister when they fire, so whatever is
  left in the registry is a latch that is still waiting on work, or one that
  leaked.
  """

  def __init__(self, enabled=False):
    self.enabled = enabled
    self.next_id = 0
    self.active = []

  def register(self, latch):
    if not self.enabled:
      return

    latch.id = self.next_id
    self.next_id += 1
    self.active.append(latch)
    self.trace("Created", latch)

  def deregister(self, latch):
    # latches created while disabled were never added
    if latch in self.active:
      self.active.remove(latch)
    self.trace("Fired", latch)

  def trace(self, action, latch):
    if self.enabled:
      logger.info("%s latch: %r", action, latch)

  def list_unfired(self):
    return list(self.active)

  def clear(self):
    del self.active[:]


default = Registry()


def enable():
  default.enabled = True


def disable():
  default.enabled = False


def list_unfired():
  return default.list_unfired()
