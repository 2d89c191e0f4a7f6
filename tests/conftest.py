"""Test configuration and fixtures."""

import logfire

# Keep test output free of console spans and never export
logfire.configure(send_to_logfire=False, console=False)
