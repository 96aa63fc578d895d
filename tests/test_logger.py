import logging
import os
import subprocess
import sys

from sample_size_explorer.logger import setup_logger


def test_unknown_level_falls_back_to_info():
    assert setup_logger("sample_size_explorer.tests.bad_level", level="verbose").level == logging.INFO


def test_known_level_is_applied():
    assert setup_logger("sample_size_explorer.tests.debug_level", level="debug").level == logging.DEBUG


def test_package_imports_with_unknown_env_level():
    env = {**os.environ, "SAMPLE_SIZE_EXPLORER_LOG_LEVEL": "verbose"}
    result = subprocess.run(
        [sys.executable, "-c",
         "from sample_size_explorer import required_sample_size; print(required_sample_size(0.5, 0.55))"],
        env=env, capture_output=True, text=True,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "1565"
