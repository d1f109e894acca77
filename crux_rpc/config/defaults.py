"""crux_rpc.config.defaults
=========================

Central place for small, stable default values used across the crux_rpc
package. These defaults can be overridden via environment variables or an
external configuration file, but provide sensible fallbacks for local
development and tests.

This module intentionally avoids importing from other crux_rpc packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Registry ----

# Compute "did you mean" suggestions when a method name fails to resolve.
DEFAULT_SUGGEST_METHODS = True
# Separator joining namespace segments into a qualified method name.
DEFAULT_NAMESPACE_SEPARATOR = "."

# ---- Suggestions ----

# Maximum number of names returned by a suggestion lookup.
MAX_SUGGESTIONS = 5
# Edit distances above this cap are not computed (treated as no match).
MAX_SUGGESTION_DISTANCE = 25

# ---- Environment ----

CONFIG_FILE_ENV = "CRUX_RPC_CONFIG_FILE"
SUGGEST_METHODS_ENV = "CRUX_RPC_SUGGEST_METHODS"
NAMESPACE_SEPARATOR_ENV = "CRUX_RPC_NAMESPACE_SEPARATOR"
