"""Run every feature file against the live targets in config.properties.

    pytest features --cucumberjson=target/cucumber-reports.json

Step definitions and hooks are registered by the root conftest.py.
"""
from pathlib import Path

from pytest_bdd import scenarios

FEATURES_DIR = Path(__file__).resolve().parent

scenarios(str(FEATURES_DIR / "ui"), str(FEATURES_DIR / "api"))
