"""vulcan-qa: BDD-driven UI and API test automation on Playwright, httpx and pytest-bdd."""

__version__ = "1.0.0"
