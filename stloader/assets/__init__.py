"""Packaged resources bundled with stloader (fallback icon and friends)."""
