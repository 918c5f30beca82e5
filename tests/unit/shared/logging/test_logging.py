import logging
import os
import subprocess
import sys
from pathlib import Path

from bign import N, PrecisionPolicy, policy_scope
from bign.shared.config import get_settings

PROJECT_ROOT = Path(__file__).resolve().parents[4]

HOST_SCRIPT = """
import logging

import bign

with bign.policy_scope(bign.PrecisionPolicy(default_precision=4)):
    bign.N.from_decimal_string("1.5").value_of()

bign.N.from_decimal_string("2").sqrt()

root = logging.getLogger()
print(len(root.handlers), root.level)
"""


def test_importing_and_using_bign_leaves_host_logging_alone():
    env = {**os.environ, "PYTHONPATH": str(PROJECT_ROOT)}

    result = subprocess.run(
        [sys.executable, "-c", HOST_SCRIPT],
        cwd=PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
        check=True,
    )

    assert result.stdout.split() == ["0", str(logging.WARNING)]
    assert "settings_loaded" not in result.stdout + result.stderr
    assert "precision_policy_set" not in result.stdout + result.stderr


def test_using_bign_does_not_touch_root_handlers():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    get_settings()
    with policy_scope(PrecisionPolicy(default_precision=4)):
        N.from_decimal_string("1.5").sq()

    assert root.handlers == handlers
    assert root.level == level


def test_events_are_routed_through_stdlib_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="bign")

    get_settings()

    messages = [r.getMessage() for r in caplog.records if r.name.startswith("bign")]
    assert any("settings_loaded" in m for m in messages)
