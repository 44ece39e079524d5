pytest_plugins = [
    "vulcan_qa.plugin",
    "vulcan_qa.steps.ui_login",
    "vulcan_qa.steps.api_health",
    "vulcan_qa.steps.api_users",
]
