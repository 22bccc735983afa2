"""Allow ``python -m taskflow_api``."""

from taskflow_api.main import main

main()
