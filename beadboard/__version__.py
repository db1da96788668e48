"""Version information for Beadboard."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the HTTP API or config wire shape
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Python engine
#         - Route manifest + rig directory scan feed one immutable source registry
#         - Concurrent bead listing across rigs with per-rig timeout and partial-failure tolerance
#         - Board config store with partial-update merge and atomic writes
#         - Layered process settings (YAML + BEADBOARD_* environment)
# 0.1.0 - Initial release
#         - Single-rig bead listing and detail lookup
