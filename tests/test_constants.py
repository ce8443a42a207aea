"""
Centralized test credentials and endpoints.

All test-only credentials are loaded from environment variables when available,
with clearly non-production placeholders as fallbacks.
"""

from __future__ import annotations

import os

# Object store
TEST_STORAGE_URL = "https://storage.test"
TEST_STORAGE_KEY = os.environ.get("TEST_STORAGE_KEY") or "k"
TEST_STORAGE_BUCKET = "branding"

# Pluggou credentials used in update payloads
TEST_PLUGGOU_API_KEY = os.environ.get("TEST_PLUGGOU_API_KEY") or "p"
