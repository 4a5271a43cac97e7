"""Shared test configuration and fixtures for the block puzzle test suite."""

import os
import sys

import pytest

# Ensure project root is importable
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


# Corridor with a closed exit: the player can walk right six times.
CORRIDOR_MAP = (
    "8\n"
    "2\n"
    "s      x\n"
    "gb......\n"
)

# Crate in front of a goal, a block further right.
CRATE_MAP = (
    "6\n"
    "2\n"
    "scg b \n"
    "x.....\n"
)


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def simple_map_path():
    return os.path.join(FIXTURES_DIR, "simple.map")


@pytest.fixture
def simple_map_text(simple_map_path):
    with open(simple_map_path) as f:
        return f.read()


@pytest.fixture
def win_log_path():
    return os.path.join(FIXTURES_DIR, "simple_win.log")


@pytest.fixture
def quit_log_path():
    return os.path.join(FIXTURES_DIR, "simple_quit.log")


@pytest.fixture
def config_fixture_path():
    return os.path.join(FIXTURES_DIR, "config.json")


@pytest.fixture
def corridor_map_text():
    return CORRIDOR_MAP


@pytest.fixture
def crate_map_text():
    return CRATE_MAP
