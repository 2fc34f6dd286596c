class LatchError(Exception):
  TYPE = "LatchError"

  def __init__(self, message, source=None):
    super().__init__(message)
    self.message = message
    self.source = source

  @property
  def type(self):
    return self.TYPE


class LatchUnderflowError(LatchError):
  TYPE = "LatchUnderflow"

  def __init__(self, source=None):
    super().__init__(
        "cannot release a latch whose count is already 0", source)


class LatchDoubleFireError(LatchUnderflowError):
  TYPE = "LatchDoubleFire"

  def __init__(self, source=None):
    LatchError.__init__(self, "cannot release a latch that has already fired",
                        source)


class LatchAlreadyFiredError(LatchError):
  TYPE = "LatchAlreadyFired"

  def __init__(self, source=None):
    super().__init__("cannot acquire a latch that has already fired", source)
