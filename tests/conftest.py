"""Global test fixtures."""

import os

import logfire

# Keep tests away from any user config or data directory
os.environ.pop("SEODEX_CONFIG_FILE", None)
os.environ.setdefault("SEODEX_DATABASE__URL", "sqlite+aiosqlite:///:memory:")

# Spans stay local and silent during tests
logfire.configure(send_to_logfire=False, console=False)
