"""
Pytest configuration for lavaboard tests.
"""
import io
import os
import sys

import pytest

# Make `import lavaboard` work from a plain checkout (src/ on sys.path)
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)


@pytest.fixture
def sink():
	return io.StringIO()


@pytest.fixture
def console(sink):
	from lavaboard.renderer import FrameConsole
	return FrameConsole(sink)


@pytest.fixture
def lines(sink):
	def _lines():
		return sink.getvalue().splitlines()
	return _lines
