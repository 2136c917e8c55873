"""Test configuration and fixtures."""

import logfire

# Keep test output quiet and never ship test spans anywhere
logfire.configure(send_to_logfire=False, console=False)
