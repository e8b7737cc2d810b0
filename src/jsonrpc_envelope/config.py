"""Environment-driven defaults."""
import os

TRUTHY = {"1", "true", "yes", "on"}

# Reject server error codes outside -32099..-32000 when decoding.
STRICT_ERROR_CODES = os.getenv("JSONRPC_STRICT_ERROR_CODES", "").strip().lower() in TRUTHY
