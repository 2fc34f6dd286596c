import os
import tempfile
import unittest
from unittest import mock

from asem import __main__ as cli
from asem import latch
from asem import registry


class MainTest(unittest.TestCase):
  def setUp(self):
    patcher = mock.patch.object(registry, "default", registry.Registry())
    patcher.start()
    self.addCleanup(patcher.stop)

    fd, self.config = tempfile.mkstemp(suffix=".yaml")
    with os.fdopen(fd, "w") as f:
      f.write("demo:\n  max_delay: 0\n")
    self.addCleanup(os.remove, self.config)

  def test_runs_demo(self):
    with self.assertLogs("asem.demo", level="INFO") as cm:
      assert cli.main(["-c", self.config, "--tasks", "2", "--debug"]) == 0

    assert cm.output[-1].endswith("All 2 tasks finished")
    assert registry.default.enabled

  def test_no_tasks(self):
    assert cli.main(["-c", self.config, "--tasks", "0"]) == 0

  def test_log_level_from_config(self):
    with open(self.config, "w") as f:
      f.write("log_level: DEBUG\ndemo:\n  max_delay: 0\n")

    with mock.patch.object(cli.coloredlogs, "install") as install:
      assert cli.main(["-c", self.config, "--tasks", "0"]) == 0

    _, kwargs = install.call_args
    assert kwargs["level"] == "DEBUG"

  def test_reports_leaked_latch(self):
    registry.default.enabled = True
    leaked = latch.Latch(1)

    with mock.patch.object(cli.config_format, "apply"):
      with self.assertLogs("asem.demo", level="ERROR") as cm:
        assert cli.main(["-c", self.config, "--tasks", "0"]) == 1

    assert repr(leaked) in cm.output[0]

  def test_negative_tasks(self):
    with self.assertRaises(SystemExit):
      cli.main(["--tasks", "-1"])
